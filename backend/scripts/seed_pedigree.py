"""
Script to seed the database with owners and a sample multi-generation pedigree.

Horses are created through HorseService so the seed data passes the same
integrity checks as API writes. Run from the backend directory:

    python scripts/seed_pedigree.py
"""

import asyncio
from datetime import date

from studbook.config import get_settings
from studbook.database import AsyncSessionLocal, init_db
from studbook.logging_config import configure_logging
from studbook.models import Owner, Sex
from studbook.schemas import HorseCreate
from studbook.services import HorseService


OWNERS = [
    ("Anna", "Huber", "Breeder in Lower Austria"),
    ("Lukas", "Gruber", None),
]

# (key, name, date_of_birth, sex, owner index, mother key, father key)
HORSES = [
    ("nasrullah", "Nasrullah", date(1998, 3, 2), Sex.MALE, 0, None, None),
    ("mumtaz", "Mumtaz Begum", date(1999, 4, 11), Sex.FEMALE, 0, None, None),
    ("princequillo", "Princequillo", date(1999, 5, 20), Sex.MALE, 1, None, None),
    ("hildene", "Hildene", date(2000, 2, 8), Sex.FEMALE, None, None, None),
    ("royal_charger", "Royal Charger", date(2005, 6, 1), Sex.MALE, 0, "mumtaz", "nasrullah"),
    ("first_landing", "First Landing", date(2006, 3, 14), Sex.FEMALE, 1, "hildene", "princequillo"),
    ("turn_to", "Turn-To", date(2011, 4, 27), Sex.MALE, 0, "first_landing", "royal_charger"),
    ("somethingroyal", "Somethingroyal", date(2010, 1, 30), Sex.FEMALE, 1, None, "princequillo"),
    ("hail", "Hail to Reason", date(2016, 5, 18), Sex.MALE, None, "somethingroyal", "turn_to"),
]


async def seed() -> None:
    """Insert the sample owners and horses in one transaction."""
    await init_db()

    async with AsyncSessionLocal() as session:
        owners = []
        for first_name, last_name, description in OWNERS:
            owner = Owner(first_name=first_name, last_name=last_name, description=description)
            session.add(owner)
            owners.append(owner)
        await session.flush()

        service = HorseService(session)
        ids: dict[str, int] = {}
        for key, name, born, sex, owner_index, mother_key, father_key in HORSES:
            horse = await service.create_horse(
                HorseCreate(
                    name=name,
                    date_of_birth=born,
                    sex=sex,
                    owner_id=owners[owner_index].id if owner_index is not None else None,
                    mother_id=ids.get(mother_key) if mother_key else None,
                    father_id=ids.get(father_key) if father_key else None,
                )
            )
            ids[key] = horse.id
            print(f"  {horse.id:>3}  {name}")

        await session.commit()

    print(f"Seeded {len(OWNERS)} owners and {len(HORSES)} horses")


def main():
    configure_logging(get_settings().log_level)
    asyncio.run(seed())


if __name__ == "__main__":
    main()
