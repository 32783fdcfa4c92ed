"""Owner repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from studbook.models import Owner
from studbook.repositories.base import BaseRepository


class OwnerRepository(BaseRepository[Owner]):
    """Repository for Owner model; satisfies ``OwnerLookup``."""

    def __init__(self, session: AsyncSession):
        super().__init__(Owner, session)
