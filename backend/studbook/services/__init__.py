"""Business logic services."""

from studbook.services.horse_service import HorseService
from studbook.services.horse_validator import HorseValidator, ValidationReport
from studbook.services.pedigree_builder import PedigreeBuilder

__all__ = [
    "HorseService",
    "HorseValidator",
    "PedigreeBuilder",
    "ValidationReport",
]
