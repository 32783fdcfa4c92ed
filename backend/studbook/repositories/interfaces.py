"""Store interfaces the pedigree core depends on."""

from typing import Protocol

from studbook.models import Horse
from studbook.schemas import HorseParent


class HorseStore(Protocol):
    """Read access to persisted horses."""

    async def get(self, id: int) -> Horse | None:
        """Return the horse or None when it does not exist."""
        ...

    async def get_children_by_parent_id(self, id: int) -> list[Horse]:
        """Return horses referencing ``id`` as mother or father."""
        ...

    async def get_parent_summary(self, id: int) -> HorseParent | None: ...


class OwnerLookup(Protocol):
    async def exists(self, id: int) -> bool: ...
