"""Pydantic schemas."""

from studbook.schemas.common import BaseSchema, TimestampSchema
from studbook.schemas.horse import (
    HorseCreate,
    HorseDetail,
    HorseFamilyTree,
    HorseListItem,
    HorseOwner,
    HorseParent,
    HorseSearch,
    HorseUpdate,
)

__all__ = [
    "BaseSchema",
    "TimestampSchema",
    "HorseCreate",
    "HorseUpdate",
    "HorseSearch",
    "HorseParent",
    "HorseOwner",
    "HorseListItem",
    "HorseDetail",
    "HorseFamilyTree",
]
