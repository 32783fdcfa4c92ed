"""Pedigree (family tree) construction."""

import logging

from studbook.errors import FatalError, NotFoundError
from studbook.models import Horse
from studbook.repositories.interfaces import HorseStore
from studbook.schemas import HorseFamilyTree
from studbook.services.horse_validator import HorseValidator

logger = logging.getLogger(__name__)


class PedigreeBuilder:
    """Builds a horse's ancestor tree, bounded by a number of generations.

    The root counts as the first generation. Mother and father lines are
    walked independently, so an ancestor reachable through both appears
    twice. Recursion depth never exceeds the validator's maximum because the
    depth is validated up front and decremented on every descent.

    Parents are only fetched for generations inside the requested depth, so
    a dangling parent reference on the last generation goes unnoticed.
    """

    def __init__(self, horse_store: HorseStore, validator: HorseValidator):
        self.horse_store = horse_store
        self.validator = validator

    async def build_tree(self, root_id: int, depth: int) -> HorseFamilyTree:
        """Build the pedigree of ``root_id`` with ``depth`` generations.

        Raises:
            ValidationError: depth is outside ``[1, max_generations]``.
            NotFoundError: the root horse does not exist.
            FatalError: a stored parent reference does not resolve.
        """
        self.validator.validate_generations(depth)

        root = await self.horse_store.get(root_id)
        if root is None:
            raise NotFoundError(f"No horse with ID {root_id} found")

        tree = await self._build(root, depth)
        logger.info("Built family tree for horse %s with %d generations", root_id, depth)
        return tree

    async def _build(self, horse: Horse | None, remaining: int) -> HorseFamilyTree | None:
        if remaining <= 0 or horse is None:
            return None

        mother = None
        father = None
        if remaining > 1:
            if horse.mother_id is not None:
                mother_horse = await self._resolve_parent(horse, horse.mother_id, "Mother")
                mother = await self._build(mother_horse, remaining - 1)
            if horse.father_id is not None:
                father_horse = await self._resolve_parent(horse, horse.father_id, "Father")
                father = await self._build(father_horse, remaining - 1)

        return HorseFamilyTree(
            id=horse.id,
            name=horse.name,
            date_of_birth=horse.date_of_birth,
            mother=mother,
            father=father,
        )

    async def _resolve_parent(self, child: Horse, parent_id: int, label: str) -> Horse:
        parent = await self.horse_store.get(parent_id)
        if parent is None:
            logger.error(
                "%s with ID %s not found but referenced by horse %s", label, parent_id, child.id
            )
            raise FatalError(
                f"{label} with ID {parent_id} not found, but was referenced by horse {child.id}"
            )
        logger.debug("Resolved %s %s of horse %s", label.lower(), parent_id, child.id)
        return parent
