"""Horse API routes."""

from datetime import date

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from studbook.database import get_db
from studbook.models import Sex
from studbook.schemas import (
    HorseCreate,
    HorseDetail,
    HorseFamilyTree,
    HorseListItem,
    HorseSearch,
    HorseUpdate,
)
from studbook.services import HorseService

router = APIRouter(prefix="/horses", tags=["horses"])


@router.get("", response_model=list[HorseListItem])
async def search_horses(
    name: str | None = Query(None),
    description: str | None = Query(None),
    born_before: date | None = Query(None),
    sex: Sex | None = Query(None),
    owner_name: str | None = Query(None),
    exclude_id: int | None = Query(None),
    limit: int | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Search horses; without filters all horses are returned."""
    params = HorseSearch(
        name=name,
        description=description,
        born_before=born_before,
        sex=sex,
        owner_name=owner_name,
        exclude_id=exclude_id,
        limit=limit,
    )
    return await HorseService(db).search_horses(params)


@router.get("/{horse_id}", response_model=HorseDetail)
async def get_horse(
    horse_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a horse by ID."""
    return await HorseService(db).get_horse(horse_id)


@router.get("/{horse_id}/familytree", response_model=HorseFamilyTree)
async def get_family_tree(
    horse_id: int,
    generations: int = Query(1),
    db: AsyncSession = Depends(get_db),
):
    """Get the pedigree of a horse; the horse itself is generation 1."""
    return await HorseService(db).get_family_tree(horse_id, generations)


@router.post("", response_model=HorseDetail, status_code=201)
async def create_horse(
    data: HorseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a new horse."""
    return await HorseService(db).create_horse(data)


@router.put("/{horse_id}", response_model=HorseDetail)
async def update_horse(
    horse_id: int,
    data: HorseUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Replace all fields of a horse."""
    return await HorseService(db).update_horse(horse_id, data)


@router.delete("/{horse_id}", status_code=204)
async def delete_horse(
    horse_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a horse."""
    await HorseService(db).delete_horse(horse_id)
    return Response(status_code=204)
