"""Seed Data — resets the store to the reference data set.

Invariants:
    - Tables are cleared children-first (exercises, members, then plans)
    - Every seed row passes validate_payload before it is inserted
    - Members and exercises are attached to plans by tier name, not by id

Usage:
    academia-seed [--create-tables]
    python -m app.seed [--create-tables]
"""

import argparse
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.domain_types import EntityKind, PlanName
from app.infrastructure.database import create_db_manager
from app.infrastructure.observability import setup_logging
from app.repositories import exercise_repository, member_repository, plan_repository
from app.schemas.validation import validate_payload

logger = logging.getLogger(__name__)

SEED_PLANS = [
    {"name": PlanName.NORMAL.value, "price": 89.90, "trainer": "Balestrin"},
    {"name": PlanName.PREMIUM.value, "price": 129.90, "trainer": "Leo Stronda"},
    {"name": PlanName.PLATINA.value, "price": 199.90, "trainer": "Carlão"},
]

SEED_EXERCISES = [
    ("normal", {"name": "Supino Reto", "description": "Desenvolvimento para peitoral"}),
    ("premium", {"name": "Agachamento Livre", "description": "Para desenvolvimento de pernas"}),
    ("platina", {"name": "Barra Fixa", "description": "Para desenvolvimento dorsal"}),
]

SEED_MEMBERS = [
    ("normal", {"name": "João Silva", "email": "joao@email.com", "age": 25}),
    ("normal", {"name": "Maria Santos", "email": "maria@email.com", "age": 30}),
    ("premium", {"name": "Carlos Oliveira", "email": "carlos@email.com", "age": 22}),
    ("platina", {"name": "Ana Costa", "email": "ana@email.com", "age": 28}),
]


async def seed_database(db: AsyncSession) -> dict[str, int]:
    """Clear all tables and insert the reference data set. Returns row counts."""
    await exercise_repository.clear(db)
    await member_repository.clear(db)
    await plan_repository.clear(db)

    plan_ids: dict[str, int] = {}
    for data in SEED_PLANS:
        plan = await plan_repository.create(
            db, validate_payload(EntityKind.PLAN, data).unwrap(),
        )
        plan_ids[plan.name] = plan.id
    logger.info("Plans created", extra={"entity": "plan"})

    for tier, data in SEED_EXERCISES:
        payload = {**data, "plan_id": plan_ids[tier]}
        await exercise_repository.create(
            db, validate_payload(EntityKind.EXERCISE, payload).unwrap(),
        )
    logger.info("Exercises created", extra={"entity": "exercise"})

    for tier, data in SEED_MEMBERS:
        payload = {**data, "plan_id": plan_ids[tier]}
        await member_repository.create(
            db, validate_payload(EntityKind.MEMBER, payload).unwrap(),
        )
    logger.info("Members created", extra={"entity": "member"})

    return {
        "plans": len(SEED_PLANS),
        "exercises": len(SEED_EXERCISES),
        "members": len(SEED_MEMBERS),
    }


async def run_seed(settings: Settings, create_tables: bool = False) -> dict[str, int]:
    db_manager = create_db_manager(settings)
    try:
        if create_tables or settings.database_create_tables:
            await db_manager.create_all()
        async with db_manager.session() as db:
            return await seed_database(db)
    finally:
        await db_manager.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Reset the store to the seed data set.")
    parser.add_argument(
        "--create-tables", action="store_true",
        help="create missing tables before seeding (local SQLite runs)",
    )
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    counts = asyncio.run(run_seed(settings, create_tables=args.create_tables))
    logger.info(f"Seed finished: {counts}")


if __name__ == "__main__":
    main()
