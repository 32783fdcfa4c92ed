"""Tests for pedigree construction."""

from datetime import date

import pytest

from studbook.errors import FatalError, NotFoundError, ValidationError
from studbook.models import Sex
from studbook.repositories import HorseRepository, OwnerRepository
from studbook.schemas import HorseFamilyTree
from studbook.services.horse_validator import HorseValidator
from studbook.services.pedigree_builder import PedigreeBuilder
from tests.fixtures.factories import create_horse
from tests.fixtures.stubs import StubHorseStore, StubOwnerLookup


def make_builder(store, max_generations=25) -> PedigreeBuilder:
    validator = HorseValidator(store, StubOwnerLookup(), max_generations=max_generations)
    return PedigreeBuilder(store, validator)


def tree_depth(node: HorseFamilyTree | None) -> int:
    if node is None:
        return 0
    return 1 + max(tree_depth(node.mother), tree_depth(node.father))


class TestPedigreeBuilderBounds:
    """Depth validation happens before the store is touched."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("depth", [0, -3, 26])
    async def test_invalid_depth_fails_without_store_access(self, depth):
        """Invalid depth is rejected before any lookup."""
        store = StubHorseStore([create_horse(id=1)])

        with pytest.raises(ValidationError):
            await make_builder(store).build_tree(1, depth)

        assert store.calls == 0

    @pytest.mark.asyncio
    async def test_unknown_root_is_not_found(self):
        """Unknown root raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await make_builder(StubHorseStore()).build_tree(5, 3)

    @pytest.mark.asyncio
    async def test_dangling_parent_reference_is_fatal(self):
        """Unresolvable parent reference is fatal."""
        store = StubHorseStore([create_horse(id=1, mother_id=404)])

        with pytest.raises(FatalError):
            await make_builder(store).build_tree(1, 2)

    @pytest.mark.asyncio
    async def test_dangling_reference_beyond_depth_is_not_fetched(self):
        """Parents of the last generation are never looked up."""
        store = StubHorseStore([create_horse(id=1, mother_id=404)])

        tree = await make_builder(store).build_tree(1, 1)

        assert tree.mother is None
        assert store.calls == 1

    @pytest.mark.asyncio
    async def test_long_line_is_cut_at_maximum_depth(self):
        """Deep lines stop at the maximum depth."""
        horses = [create_horse(id=1, date_of_birth=date(1990, 1, 1))]
        for i in range(2, 31):
            horses.append(create_horse(id=i, date_of_birth=date(1990 + i, 1, 1), father_id=i - 1))
        store = StubHorseStore(horses)

        tree = await make_builder(store, max_generations=25).build_tree(30, 25)

        assert tree_depth(tree) == 25


class TestPedigreeBuilderShape:
    """Tree shape against a persisted pedigree."""

    def builder(self, db_session) -> PedigreeBuilder:
        horse_repo = HorseRepository(db_session)
        validator = HorseValidator(horse_repo, OwnerRepository(db_session))
        return PedigreeBuilder(horse_repo, validator)

    @pytest.mark.asyncio
    async def test_horse_without_parents_is_single_node(self, db_session, test_horse):
        """Parentless horse is a single node at any depth."""
        for depth in (1, 2, 25):
            tree = await self.builder(db_session).build_tree(test_horse.id, depth)

            assert tree.id == test_horse.id
            assert tree.mother is None
            assert tree.father is None

    @pytest.mark.asyncio
    async def test_depth_one_is_root_only(self, db_session, pedigree):
        """Depth one returns the root alone."""
        tree = await self.builder(db_session).build_tree(pedigree["foal"].id, 1)

        assert tree.name == "Foal"
        assert tree.date_of_birth == date(2015, 7, 20)
        assert tree.mother is None
        assert tree.father is None

    @pytest.mark.asyncio
    async def test_depth_two_includes_parents(self, db_session, pedigree):
        """Depth two adds the parents."""
        tree = await self.builder(db_session).build_tree(pedigree["foal"].id, 2)

        assert tree.mother.id == pedigree["mother"].id
        assert tree.father.id == pedigree["father"].id
        assert tree.mother.mother is None
        assert tree.mother.father is None

    @pytest.mark.asyncio
    async def test_depth_three_includes_grandparents(self, db_session, pedigree):
        """Depth three adds the grandparents."""
        tree = await self.builder(db_session).build_tree(pedigree["foal"].id, 3)

        assert tree.mother.mother.id == pedigree["grandmother"].id
        assert tree.mother.father.id == pedigree["grandfather"].id
        assert tree.father.mother is None
        assert tree_depth(tree) == 3

    @pytest.mark.asyncio
    async def test_deeper_request_stops_at_known_ancestors(self, db_session, pedigree):
        """Tree ends where ancestors are unknown."""
        tree = await self.builder(db_session).build_tree(pedigree["foal"].id, 10)

        assert tree_depth(tree) == 3

    @pytest.mark.asyncio
    async def test_shared_ancestor_appears_in_both_lines(self, db_session, pedigree):
        """A common ancestor is repeated in each line."""
        # Half siblings by the same grandfather produce an inbred foal
        half_sister = create_horse(
            name="Half Sister",
            date_of_birth=date(2009, 1, 1),
            sex=Sex.FEMALE,
            father_id=pedigree["grandfather"].id,
        )
        db_session.add(half_sister)
        await db_session.flush()
        half_brother = create_horse(
            name="Half Brother",
            date_of_birth=date(2010, 1, 1),
            sex=Sex.MALE,
            father_id=pedigree["grandfather"].id,
        )
        db_session.add(half_brother)
        await db_session.flush()
        inbred = create_horse(
            name="Inbred",
            date_of_birth=date(2016, 1, 1),
            mother_id=half_sister.id,
            father_id=half_brother.id,
        )
        db_session.add(inbred)
        await db_session.flush()

        tree = await self.builder(db_session).build_tree(inbred.id, 3)

        assert tree.mother.father.id == pedigree["grandfather"].id
        assert tree.father.father.id == pedigree["grandfather"].id
