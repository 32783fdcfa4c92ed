"""Horse model."""

import enum
from datetime import date

from sqlalchemy import Date, Enum, ForeignKey, Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from studbook.database import Base
from studbook.models.base import TimestampMixin


class Sex(str, enum.Enum):
    """Sex of a horse."""

    MALE = "MALE"
    FEMALE = "FEMALE"


class Horse(Base, TimestampMixin):
    """Horse table model."""

    __tablename__ = "horses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(4095), nullable=True)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    sex: Mapped[Sex] = mapped_column(Enum(Sex, native_enum=False, length=6), nullable=False)
    owner_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("owners.id"), nullable=True, index=True
    )

    # Pedigree
    mother_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("horses.id", ondelete="SET NULL"), nullable=True, index=True
    )
    father_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("horses.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Written by an external image store; this service only reads or clears them
    image: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    image_mime_type: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Relationships
    owner = relationship("Owner", back_populates="horses")

    def __repr__(self) -> str:
        return f"<Horse(id={self.id}, name='{self.name}')>"
