"""샘플 데이터 시드 스크립트.

Seed script: creates sample workers, locations and shifts.

Usage:
    python -m shifts_logger.seed

Creates:
    - 20 workers with email and UK phone numbers
    - 20 UK locations
    - Up to 20 shifts spread over the month around today, none overlapping
      another shift of the same worker at the same location

Idempotent: workers and locations are only inserted into empty tables, and
shifts are topped up to 20.
"""

import asyncio
from datetime import datetime, timedelta

from sqlalchemy import func, select

from shifts_logger.database import Base, async_session, engine
from shifts_logger.models import Location, Shift, Worker
from shifts_logger.repositories.shift_repository import shift_repository
from shifts_logger.utils.logger import get_logger
from shifts_logger.utils.validation import duration_minutes

logger = get_logger(__name__)

WORKERS: list[tuple[str, str, str]] = [
    ("John Smith", "john.smith@company.com", "+44 7911 123456"),
    ("Sarah Johnson", "sarah.johnson@company.com", "+44 7700 900123"),
    ("Mike Davis", "mike.davis@company.com", "+44 7802 345678"),
    ("Emily Wilson", "emily.wilson@company.com", "+44 7920 765432"),
    ("David Brown", "david.brown@company.com", "+44 7555 123456"),
    ("Lisa Anderson", "lisa.anderson@company.com", "+44 7666 789012"),
    ("James Taylor", "james.taylor@company.com", "+44 7777 234567"),
    ("Anna Thompson", "anna.thompson@company.com", "+44 7888 345678"),
    ("Robert Miller", "robert.miller@company.com", "+44 7944 567890"),
    ("Jessica Garcia", "jessica.garcia@company.com", "+44 7712 345678"),
    ("Christopher Martinez", "christopher.martinez@company.com", "+44 7823 456789"),
    ("Amanda Rodriguez", "amanda.rodriguez@company.com", "+44 7956 789012"),
    ("Matthew Hernandez", "matthew.hernandez@company.com", "+44 7734 567890"),
    ("Jennifer Lopez", "jennifer.lopez@company.com", "+44 7867 890123"),
    ("Daniel Gonzalez", "daniel.gonzalez@company.com", "+44 7989 012345"),
    ("Michelle Wilson", "michelle.wilson@company.com", "+44 7745 678901"),
    ("Andrew Moore", "andrew.moore@company.com", "+44 7812 345678"),
    ("Stephanie Taylor", "stephanie.taylor@company.com", "+44 7967 890123"),
    ("Kevin White", "kevin.white@company.com", "+44 7890 123456"),
    ("Rachel Green", "rachel.green@company.com", "+44 7901 234567"),
]

# (name, address, town, county, post_code, country)
LOCATIONS: list[tuple[str, str, str, str, str, str]] = [
    ("London Office", "1 Canary Wharf", "London", "Greater London", "E14 5AB", "UK"),
    ("Manchester Warehouse", "22 Trafford Park", "Manchester", "Greater Manchester", "M17 1AB", "UK"),
    ("Birmingham Plant", "15 Aston Road", "Birmingham", "West Midlands", "B6 4DA", "UK"),
    ("Leeds Service Centre", "8 Wellington Place", "Leeds", "West Yorkshire", "LS1 4AP", "UK"),
    ("Bristol Research Lab", "3 Temple Quay", "Bristol", "Bristol", "BS1 6DZ", "UK"),
    ("Glasgow Branch", "45 George Square", "Glasgow", "Scotland", "G2 1DY", "UK"),
    ("Cardiff Hub", "12 Cardiff Bay", "Cardiff", "Wales", "CF10 4PA", "UK"),
    ("Newcastle Distribution Centre", "28 Quayside", "Newcastle upon Tyne", "Tyne and Wear", "NE1 3DX", "UK"),
    ("Sheffield Manufacturing Plant", "15 Meadowhall Road", "Sheffield", "South Yorkshire", "S9 1BW", "UK"),
    ("Liverpool Logistics Hub", "42 Albert Dock", "Liverpool", "Merseyside", "L3 4AF", "UK"),
    ("Brighton Sales Office", "7 Madeira Drive", "Brighton", "East Sussex", "BN2 1PS", "UK"),
    ("Cambridge Research Facility", "19 Science Park", "Cambridge", "Cambridgeshire", "CB4 0EY", "UK"),
    ("Oxford Innovation Centre", "8 Botley Road", "Oxford", "Oxfordshire", "OX2 0HH", "UK"),
    ("Norwich Regional Office", "33 Gurney Road", "Norwich", "Norfolk", "NR1 4HW", "UK"),
    ("Plymouth Marine Services", "11 The Barbican", "Plymouth", "Devon", "PL1 2LS", "UK"),
    ("Exeter Business Park", "25 Matford Business Park", "Exeter", "Devon", "EX2 8ED", "UK"),
    ("Southampton Port Facility", "9 Ocean Gate", "Southampton", "Hampshire", "SO14 3QN", "UK"),
    ("Edinburgh Tech Hub", "5 Charlotte Square", "Edinburgh", "Scotland", "EH2 4DR", "UK"),
    ("Leicester Innovation Centre", "18 Millennium Point", "Leicester", "Leicestershire", "LE1 3RW", "UK"),
    ("Nottingham Digital Campus", "25 Talbot Street", "Nottingham", "Nottinghamshire", "NG1 5GG", "UK"),
]

TARGET_SHIFT_COUNT: int = 20
_START_HOURS: tuple[int, ...] = (6, 7, 8, 9, 14, 15, 16, 18, 22)
_DURATION_HOURS: tuple[int, ...] = (4, 6, 8, 10, 12)


def planned_shifts(
    worker_ids: list[int],
    location_ids: list[int],
    count: int,
    today: datetime,
) -> list[tuple[int, int, datetime, datetime]]:
    """Spread `count` shifts across workers, locations and the days around `today`.

    Returns:
        list of (worker_id, location_id, start_time, end_time)
    """
    base: datetime = today.replace(hour=0, minute=0, second=0, microsecond=0)
    plan: list[tuple[int, int, datetime, datetime]] = []
    for i in range(count):
        start: datetime = base + timedelta(days=i - count // 2, hours=_START_HOURS[i % len(_START_HOURS)])
        end: datetime = start + timedelta(hours=_DURATION_HOURS[i % len(_DURATION_HOURS)])
        plan.append(
            (worker_ids[i % len(worker_ids)], location_ids[(i * 3) % len(location_ids)], start, end)
        )
    return plan


async def seed() -> None:
    """Seed the database with sample data.

    Creates tables if they don't exist, then fills empty worker and
    location tables and tops shifts up to TARGET_SHIFT_COUNT.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if not (await db.execute(select(Worker.id).limit(1))).first():
            db.add_all(Worker(name=n, email=e, phone_number=p) for n, e, p in WORKERS)
            await db.flush()
            logger.info("Seeded %d workers", len(WORKERS))

        if not (await db.execute(select(Location.id).limit(1))).first():
            db.add_all(
                Location(name=n, address=a, town=t, county=c, post_code=pc, country=co)
                for n, a, t, c, pc, co in LOCATIONS
            )
            await db.flush()
            logger.info("Seeded %d locations", len(LOCATIONS))

        shift_count: int = (await db.execute(select(func.count()).select_from(Shift))).scalar() or 0
        if shift_count >= TARGET_SHIFT_COUNT:
            logger.info("Sufficient shifts already exist (%d). Skipping.", shift_count)
            await db.commit()
            return

        worker_ids: list[int] = list((await db.execute(select(Worker.id).order_by(Worker.id))).scalars())
        location_ids: list[int] = list((await db.execute(select(Location.id).order_by(Location.id))).scalars())

        added: int = 0
        for worker_id, location_id, start, end in planned_shifts(
            worker_ids, location_ids, TARGET_SHIFT_COUNT - shift_count, datetime.now()
        ):
            conflict = await shift_repository.find_overlapping(db, worker_id, location_id, start, end)
            if conflict is not None:
                continue
            db.add(
                Shift(
                    worker_id=worker_id,
                    location_id=location_id,
                    start_time=start,
                    end_time=end,
                    duration_minutes=duration_minutes(start, end),
                )
            )
            await db.flush()
            added += 1

        await db.commit()
        logger.info("Added %d shifts", added)


def main() -> None:
    asyncio.run(seed())


if __name__ == "__main__":
    main()
