"""Genealogical integrity checks for horse writes and pedigree requests.

Field checks and relational checks always run to completion so a caller sees
every problem in one response. Structural problems are reported as
``ValidationError``; relational problems against persisted horses as
``ConflictError``. Structural failures take precedence when both occur.

The validator only reads from the store. Its verdict is valid for the
snapshot it read, so the write that follows must happen in the same unit of
work (see ``studbook.database``).
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from studbook.errors import ConflictError, NotFoundError, ValidationError
from studbook.models import Horse, Sex
from studbook.repositories.interfaces import HorseStore, OwnerLookup
from studbook.schemas import HorseCreate, HorseSearch, HorseUpdate

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 4095
DEFAULT_MAX_GENERATIONS = 25


@dataclass
class ValidationReport:
    """Collects structural and relational violations separately."""

    validation_errors: list[str] = field(default_factory=list)
    conflict_errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.validation_errors and not self.conflict_errors

    def raise_for_errors(self, summary: str) -> None:
        """Raise the failure class that takes precedence, if any."""
        if self.validation_errors:
            raise ValidationError(summary, self.validation_errors)
        if self.conflict_errors:
            raise ConflictError("Conflict with existing data", self.conflict_errors)


@dataclass(frozen=True)
class _ParentRole:
    label: str
    sex: Sex
    pronoun: str

    @property
    def key(self) -> str:
        return self.label.lower()


MOTHER = _ParentRole("Mother", Sex.FEMALE, "her")
FATHER = _ParentRole("Father", Sex.MALE, "his")


class HorseValidator:
    """Validator for horse create/update/search and pedigree requests."""

    def __init__(
        self,
        horse_store: HorseStore,
        owner_lookup: OwnerLookup,
        *,
        max_generations: int = DEFAULT_MAX_GENERATIONS,
        today: Callable[[], date] = date.today,
    ):
        self.horse_store = horse_store
        self.owner_lookup = owner_lookup
        self.max_generations = max_generations
        self.today = today

    def validate_generations(self, generations: int) -> None:
        """Check a pedigree depth; never touches the store."""
        logger.debug("validate_generations(%s)", generations)

        errors = []
        if generations < 1:
            errors.append("Generations must be at minimum 1")
        if generations > self.max_generations:
            errors.append(f"Generations must not exceed {self.max_generations}")

        if errors:
            raise ValidationError("Validation of generations parameter failed", errors)

    def validate_for_search(self, params: HorseSearch) -> None:
        """Structural checks for search filters.

        Filters referring to unknown owners are fine; they just match less.
        """
        logger.debug("validate_for_search(%s)", params)

        errors = []
        if params.name is not None and len(params.name) > MAX_NAME_LENGTH:
            errors.append("Search name too long: must be 255 characters or fewer")
        if params.description is not None and len(params.description) > MAX_DESCRIPTION_LENGTH:
            errors.append("Search description too long: must be 4095 characters or fewer")
        if params.owner_name is not None and len(params.owner_name) > MAX_NAME_LENGTH:
            errors.append("Owner name too long: must be 255 characters or fewer")
        if params.limit is not None and params.limit < 1:
            errors.append("Search limit must be greater or equal to 1")

        if errors:
            raise ValidationError("Validation of horse search parameters failed", errors)

    async def check_for_create(self, candidate: HorseCreate) -> ValidationReport:
        """Collect every violation of a horse about to be created."""
        logger.debug("check_for_create(%s)", candidate)

        report = ValidationReport()
        self._check_fields(candidate, report)
        await self._check_owner(candidate, report)
        await self._check_parent(candidate, candidate.mother_id, MOTHER, report)
        await self._check_parent(candidate, candidate.father_id, FATHER, report)
        return report

    async def validate_for_create(self, candidate: HorseCreate) -> None:
        """Raise ``ValidationError`` or ``ConflictError`` for an invalid new horse."""
        report = await self.check_for_create(candidate)
        report.raise_for_errors("Validation of horse for create failed")

    async def check_for_update(self, horse_id: int, candidate: HorseUpdate) -> ValidationReport:
        """Collect every violation of replacing horse ``horse_id`` with ``candidate``.

        Raises ``NotFoundError`` right away when the target does not exist.
        """
        logger.debug("check_for_update(%s, %s)", horse_id, candidate)

        existing = await self.horse_store.get(horse_id)
        if existing is None:
            raise NotFoundError(f"No horse with ID {horse_id} found")

        report = ValidationReport()
        await self._check_children(existing, candidate, report)
        self._check_fields(candidate, report)
        await self._check_owner(candidate, report)
        for parent_id, role in ((candidate.mother_id, MOTHER), (candidate.father_id, FATHER)):
            if parent_id is not None and parent_id == horse_id:
                report.validation_errors.append(f"Horse cannot be its own {role.key}")
                continue
            await self._check_parent(candidate, parent_id, role, report)

        if candidate.delete_image is None:
            report.validation_errors.append("Delete image cannot be null")
        return report

    async def validate_for_update(self, horse_id: int, candidate: HorseUpdate) -> None:
        """Raise ``NotFoundError``, ``ValidationError`` or ``ConflictError`` for a bad update."""
        report = await self.check_for_update(horse_id, candidate)
        report.raise_for_errors("Validation of horse for update failed")

    def _check_fields(self, candidate: HorseCreate, report: ValidationReport) -> None:
        errors = report.validation_errors

        if candidate.name is None or not candidate.name.strip():
            errors.append("Horse name is required and cannot be empty")
        if candidate.name is not None and len(candidate.name) > MAX_NAME_LENGTH:
            errors.append("Horse name too long: longer than 255 characters")

        if candidate.description is not None:
            if not candidate.description.strip():
                errors.append("Horse description is given but blank")
            if len(candidate.description) > MAX_DESCRIPTION_LENGTH:
                errors.append("Horse description too long: longer than 4095 characters")

        if candidate.date_of_birth is None:
            errors.append("Horse birth date is required")
        elif candidate.date_of_birth > self.today():
            errors.append("Horse birth date cannot be in the future")

        if candidate.sex is None:
            errors.append("Sex is required")

    async def _check_owner(self, candidate: HorseCreate, report: ValidationReport) -> None:
        if candidate.owner_id is None:
            return
        if not await self.owner_lookup.exists(candidate.owner_id):
            report.validation_errors.append(f"Owner with ID {candidate.owner_id} does not exist")

    async def _check_parent(
        self,
        candidate: HorseCreate,
        parent_id: int | None,
        role: _ParentRole,
        report: ValidationReport,
    ) -> None:
        if parent_id is None:
            return

        parent = await self.horse_store.get(parent_id)
        if parent is None:
            report.validation_errors.append(f"{role.label} with ID {parent_id} does not exist")
            return

        if parent.sex != role.sex:
            report.conflict_errors.append(f"Sex of {role.key} has to be {role.sex.value}")
        # A missing birth date is already a structural error
        if candidate.date_of_birth is not None and not parent.date_of_birth < candidate.date_of_birth:
            report.conflict_errors.append(f"{role.label} has to be older than {role.pronoun} child")

    async def _check_children(
        self, existing: Horse, candidate: HorseUpdate, report: ValidationReport
    ) -> None:
        """Reject sex or birth date changes that contradict existing children."""
        children = await self.horse_store.get_children_by_parent_id(existing.id)
        if not children:
            return

        if candidate.sex is not None and candidate.sex != existing.sex:
            report.conflict_errors.append("Cannot change sex of a horse that has children")

        new_birth = candidate.date_of_birth
        if new_birth is not None and new_birth != existing.date_of_birth:
            for child in children:
                if not new_birth < child.date_of_birth:
                    report.conflict_errors.append(
                        "Cannot change date of birth to be on or after a child's birth date"
                    )
                    break
