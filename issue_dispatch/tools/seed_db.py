"""Seed the database with demo citizens, field staff and pending issues.

Usage:
    python -m issue_dispatch.tools.seed_db
    python -m issue_dispatch.tools.seed_db --issues 30 --seed 7
    python -m issue_dispatch.tools.seed_db --drop  # drop existing data first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
from dataclasses import dataclass

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from issue_dispatch.adapters.persistence.database import async_session_factory
from issue_dispatch.adapters.persistence.models import CitizenModel, IssueModel, WorkerModel
from issue_dispatch.adapters.persistence.repositories import (
    SqlCitizenRepository,
    SqlIssueRepository,
    SqlWorkerRepository,
)
from issue_dispatch.domain.entities.citizen import Citizen
from issue_dispatch.domain.entities.issue import Issue
from issue_dispatch.domain.entities.worker import Worker
from issue_dispatch.domain.value_objects.enums import Department, DutyStatus, IssueStatus
from issue_dispatch.domain.value_objects.geo_point import GeoPoint

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)

# Demo area: a ~1 km box in Bhopal
AREA_ORIGIN = GeoPoint(latitude=23.250, longitude=77.495)
AREA_SPAN_DEG = 0.01

DEMO_CITIZENS = [
    ("Alice", "alice@example.com"),
    ("Bob", "bob@example.com"),
    ("Charlie", "charlie@example.com"),
    ("David", "david@example.com"),
    ("Eve", "eve@example.com"),
]

DEMO_WORKERS = [
    (Department.SECURITY, "security1@example.com", GeoPoint(23.2523687, 77.4963816)),
    (Department.ROADS, "roads1@example.com", GeoPoint(23.253, 77.497)),
    (Department.ROADS, "roads2@example.com", GeoPoint(23.2485, 77.5012)),
    (Department.SANITATION, "sanitation1@example.com", GeoPoint(23.251, 77.495)),
    (Department.ELECTRICAL, "electrical1@example.com", GeoPoint(23.2541, 77.4988)),
    (Department.GENERAL, "general1@example.com", GeoPoint(23.2502, 77.4977)),
]

DEMO_CATEGORIES = ["Security", "Pothole", "Garbage", "Streetlight"]


@dataclass
class DemoData:
    citizens: list[Citizen]
    workers: list[Worker]
    issues: list[Issue]


def _new_id(rng: random.Random) -> str:
    return f"{rng.getrandbits(80):020x}"


def build_demo_data(rng: random.Random, issue_count: int = 15) -> DemoData:
    """Generate demo entities; deterministic for a seeded *rng*."""
    citizens = [Citizen(id=_new_id(rng), name=name, email=email) for name, email in DEMO_CITIZENS]
    workers = [
        Worker(
            id=_new_id(rng),
            department=department.value,
            duty_status=DutyStatus.ON_DUTY,
            live_location=location,
            email=email,
        )
        for department, email, location in DEMO_WORKERS
    ]
    issues = [
        Issue(
            id=_new_id(rng),
            category=rng.choice(DEMO_CATEGORIES),
            location=GeoPoint(
                latitude=AREA_ORIGIN.latitude + rng.random() * AREA_SPAN_DEG,
                longitude=AREA_ORIGIN.longitude + rng.random() * AREA_SPAN_DEG,
            ),
            reporter_id=rng.choice(citizens).id,
            status=IssueStatus.PENDING,
        )
        for _ in range(issue_count)
    ]
    return DemoData(citizens=citizens, workers=workers, issues=issues)


async def _drop_data(session: AsyncSession) -> None:
    """Delete all data in correct order (respecting FK constraints)."""
    for model in [IssueModel, WorkerModel, CitizenModel]:
        await session.execute(delete(model))
    await session.commit()
    logger.info("Dropped all existing data")


async def seed(issue_count: int = 15, rng_seed: int | None = None, drop: bool = False) -> dict[str, int]:
    """Main seed function. Returns counts of seeded records."""
    data = build_demo_data(random.Random(rng_seed), issue_count)

    async with async_session_factory() as session:
        if drop:
            await _drop_data(session)

        citizens = SqlCitizenRepository(session)
        workers = SqlWorkerRepository(session)
        issues = SqlIssueRepository(session)

        for citizen in data.citizens:
            await citizens.save(citizen)
        for worker in data.workers:
            await workers.save(worker)
        for issue in data.issues:
            await issues.save(issue)

        await session.commit()

    counts = {
        "citizens": len(data.citizens),
        "workers": len(data.workers),
        "issues": len(data.issues),
    }
    logger.info("Seeded %s", counts)
    return counts


async def _verify_data() -> None:
    """Print counts per table for a quick sanity check."""
    async with async_session_factory() as session:
        for model in [CitizenModel, WorkerModel, IssueModel]:
            total = (await session.execute(select(func.count()).select_from(model))).scalar_one()
            logger.info("%s: %d rows", model.__tablename__, total)

        by_status = await session.execute(
            select(IssueModel.status, func.count()).group_by(IssueModel.status)
        )
        logger.info("Issue status distribution: %s", dict(by_status.all()))


def main():
    parser = argparse.ArgumentParser(description="Seed the dispatch database with demo data")
    parser.add_argument("--issues", type=int, default=15, help="Number of issues (default: 15)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    parser.add_argument("--drop", action="store_true", help="Drop existing data before seeding")
    parser.add_argument("--verify-only", action="store_true", help="Only print counts, don't seed")
    args = parser.parse_args()

    if args.verify_only:
        asyncio.run(_verify_data())
    else:
        async def run_all():
            await seed(args.issues, args.seed, drop=args.drop)
            await _verify_data()
        asyncio.run(run_all())


if __name__ == "__main__":
    main()
