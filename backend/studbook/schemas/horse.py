"""Horse schemas.

Input schemas accept missing values on purpose: required-field checks belong
to ``HorseValidator`` so that every problem is reported in one response.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from studbook.models import Sex
from studbook.schemas.common import BaseSchema, TimestampSchema


class HorseCreate(BaseSchema):
    """Schema for creating a horse."""

    name: str | None = Field(None, description="Horse name")
    description: str | None = Field(None, description="Free text description")
    date_of_birth: date | None = Field(None, description="Date of birth")
    sex: Sex | None = Field(None, description="MALE or FEMALE")
    owner_id: int | None = None
    mother_id: int | None = None
    father_id: int | None = None


class HorseUpdate(HorseCreate):
    """Schema for replacing a horse; all fields are written."""

    delete_image: bool | None = Field(None, description="Drop the stored image")


class HorseSearch(BaseSchema):
    """Search filters for horses."""

    name: str | None = None
    description: str | None = None
    born_before: date | None = None
    sex: Sex | None = None
    owner_name: str | None = None
    exclude_id: int | None = None
    limit: int | None = None


class HorseParent(BaseSchema):
    """Minimal parent projection."""

    id: int
    name: str


class HorseOwner(BaseSchema):
    """Owner as shown on a horse."""

    id: int
    first_name: str
    last_name: str


class HorseListItem(BaseSchema):
    """Horse as listed in search results."""

    id: int
    name: str
    description: str | None = None
    date_of_birth: date
    sex: Sex
    owner: HorseOwner | None = None


class HorseDetail(TimestampSchema):
    """Horse detail response schema."""

    id: int
    name: str
    description: str | None = None
    date_of_birth: date
    sex: Sex
    owner: HorseOwner | None = None
    mother: HorseParent | None = None
    father: HorseParent | None = None
    has_image: bool = False  # image columns are filled outside this service


class HorseFamilyTree(BaseSchema):
    """Node of a pedigree; parents are absent past the requested depth."""

    id: int
    name: str
    date_of_birth: date
    mother: HorseFamilyTree | None = None
    father: HorseFamilyTree | None = None


HorseFamilyTree.model_rebuild()
