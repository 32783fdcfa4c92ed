"""API routers."""

from studbook.api.errors import register_error_handlers
from studbook.api.horses import router as horses_router

__all__ = [
    "horses_router",
    "register_error_handlers",
]
