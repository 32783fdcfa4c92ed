"""Data access repositories."""

from studbook.repositories.base import BaseRepository
from studbook.repositories.horse_repository import HorseRepository
from studbook.repositories.interfaces import HorseStore, OwnerLookup
from studbook.repositories.owner_repository import OwnerRepository

__all__ = [
    "BaseRepository",
    "HorseRepository",
    "OwnerRepository",
    "HorseStore",
    "OwnerLookup",
]
