"""SQLAlchemy models."""

from studbook.models.horse import Horse, Sex
from studbook.models.owner import Owner

__all__ = [
    "Horse",
    "Owner",
    "Sex",
]
