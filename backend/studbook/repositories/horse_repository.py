"""Horse repository."""

import logging

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from studbook.models import Horse, Owner
from studbook.repositories.base import BaseRepository
from studbook.schemas import HorseParent, HorseSearch

logger = logging.getLogger(__name__)


class HorseRepository(BaseRepository[Horse]):
    """Repository for Horse model; satisfies ``HorseStore``."""

    def __init__(self, session: AsyncSession):
        super().__init__(Horse, session)

    async def get_parent_summary(self, id: int) -> HorseParent | None:
        """Get the id/name projection used for parent links."""
        result = await self.session.execute(
            select(Horse.id, Horse.name).where(Horse.id == id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return HorseParent(id=row.id, name=row.name)

    async def get_children_by_parent_id(self, id: int) -> list[Horse]:
        """Get horses that reference the given horse as mother or father."""
        result = await self.session.execute(
            select(Horse)
            .where(or_(Horse.mother_id == id, Horse.father_id == id))
            .order_by(Horse.date_of_birth)
        )
        children = list(result.scalars().all())
        logger.debug("Horse %s has %d children", id, len(children))
        return children

    async def search(self, params: HorseSearch) -> list[Horse]:
        """Search horses by the given filters, owners eagerly loaded."""
        query = select(Horse).options(selectinload(Horse.owner))

        if params.name is not None:
            query = query.where(Horse.name.ilike(f"%{params.name}%"))
        if params.description is not None:
            query = query.where(Horse.description.ilike(f"%{params.description}%"))
        if params.born_before is not None:
            query = query.where(Horse.date_of_birth < params.born_before)
        if params.sex is not None:
            query = query.where(Horse.sex == params.sex)
        if params.exclude_id is not None:
            query = query.where(Horse.id != params.exclude_id)
        if params.owner_name is not None:
            full_name = Owner.first_name + " " + Owner.last_name
            query = query.join(Owner, Horse.owner_id == Owner.id).where(
                full_name.ilike(f"%{params.owner_name}%")
            )

        query = query.order_by(Horse.id)
        if params.limit is not None:
            query = query.limit(params.limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def clear_parent_references(self, id: int) -> None:
        """Orphan the children of a horse that is about to be deleted."""
        await self.session.execute(
            update(Horse).where(Horse.mother_id == id).values(mother_id=None)
        )
        await self.session.execute(
            update(Horse).where(Horse.father_id == id).values(father_id=None)
        )
