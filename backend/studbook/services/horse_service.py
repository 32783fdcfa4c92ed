"""Horse service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from studbook.config import Settings, get_settings
from studbook.errors import FatalError, NotFoundError
from studbook.models import Horse
from studbook.repositories import HorseRepository, OwnerRepository
from studbook.schemas import (
    HorseCreate,
    HorseDetail,
    HorseFamilyTree,
    HorseListItem,
    HorseOwner,
    HorseParent,
    HorseSearch,
    HorseUpdate,
)
from studbook.services.horse_validator import HorseValidator
from studbook.services.pedigree_builder import PedigreeBuilder

logger = logging.getLogger(__name__)


class HorseService:
    """Service for horse operations.

    Validation and the write it guards run on the same session, so they
    commit or roll back together.
    """

    def __init__(self, session: AsyncSession, settings: Settings | None = None):
        settings = settings or get_settings()
        self.session = session
        self.horse_repo = HorseRepository(session)
        self.owner_repo = OwnerRepository(session)
        self.validator = HorseValidator(
            self.horse_repo,
            self.owner_repo,
            max_generations=settings.max_family_tree_generations,
        )
        self.pedigree_builder = PedigreeBuilder(self.horse_repo, self.validator)

    async def get_horse(self, horse_id: int) -> HorseDetail:
        """Get a horse with its parents and owner."""
        horse = await self.horse_repo.get(horse_id)
        if horse is None:
            raise NotFoundError(f"No horse with ID {horse_id} found")
        return await self._to_detail(horse)

    async def search_horses(self, params: HorseSearch) -> list[HorseListItem]:
        """Search horses by name, description, birth date, sex and owner."""
        self.validator.validate_for_search(params)
        horses = await self.horse_repo.search(params)
        logger.debug("Found %d horses matching %s", len(horses), params)
        return [HorseListItem.model_validate(h) for h in horses]

    async def get_family_tree(self, horse_id: int, generations: int) -> HorseFamilyTree:
        """Get the pedigree of a horse."""
        return await self.pedigree_builder.build_tree(horse_id, generations)

    async def create_horse(self, data: HorseCreate) -> HorseDetail:
        """Validate and create a new horse."""
        await self.validator.validate_for_create(data)

        horse = await self.horse_repo.create(data.model_dump())
        logger.info("Created horse with id %s", horse.id)
        return await self._to_detail(horse)

    async def update_horse(self, horse_id: int, data: HorseUpdate) -> HorseDetail:
        """Validate and replace all fields of an existing horse."""
        await self.validator.validate_for_update(horse_id, data)

        values = data.model_dump(exclude={"delete_image"})
        if data.delete_image:
            values["image"] = None
            values["image_mime_type"] = None

        horse = await self.horse_repo.update(horse_id, values)
        if horse is None:
            # Validated a moment ago in this same unit of work
            raise FatalError(f"Horse with ID {horse_id} vanished during update")
        logger.info("Updated horse with id %s", horse_id)
        return await self._to_detail(horse)

    async def delete_horse(self, horse_id: int) -> None:
        """Delete a horse; its children lose the parent reference."""
        if not await self.horse_repo.exists(horse_id):
            raise NotFoundError(f"No horse with ID {horse_id} found")

        await self.horse_repo.clear_parent_references(horse_id)
        await self.horse_repo.delete(horse_id)
        logger.info("Deleted horse with id %s", horse_id)

    async def _to_detail(self, horse: Horse) -> HorseDetail:
        """Convert Horse model to HorseDetail, resolving referenced records."""
        mother = await self._parent_summary(horse, horse.mother_id, "Mother")
        father = await self._parent_summary(horse, horse.father_id, "Father")

        owner = None
        if horse.owner_id is not None:
            owner_model = await self.owner_repo.get(horse.owner_id)
            if owner_model is None:
                logger.error("Owner %s referenced by horse %s not found", horse.owner_id, horse.id)
                raise FatalError(f"Owner {horse.owner_id} referenced by horse not found")
            owner = HorseOwner.model_validate(owner_model)

        return HorseDetail(
            id=horse.id,
            name=horse.name,
            description=horse.description,
            date_of_birth=horse.date_of_birth,
            sex=horse.sex,
            owner=owner,
            mother=mother,
            father=father,
            has_image=horse.image is not None,
            created_at=horse.created_at,
            updated_at=horse.updated_at,
        )

    async def _parent_summary(
        self, horse: Horse, parent_id: int | None, label: str
    ) -> HorseParent | None:
        if parent_id is None:
            return None
        parent = await self.horse_repo.get_parent_summary(parent_id)
        if parent is None:
            logger.error(
                "%s with ID %s not found for horse %s, although it was validated",
                label,
                parent_id,
                horse.id,
            )
            raise FatalError(f"{label} with ID {parent_id} not found, although it was validated")
        return parent
