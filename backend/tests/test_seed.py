"""Seed data — resets the store to the reference data set."""

from app.repositories import exercise_repository, member_repository, plan_repository
from app.seed import seed_database


async def test_seed_inserts_reference_data(test_db):
    counts = await seed_database(test_db)

    assert counts == {"plans": 3, "exercises": 3, "members": 4}
    rows = await plan_repository.list_with_member_counts(test_db)
    assert [(plan.name, count) for plan, count in rows] == [
        ("normal", 2), ("premium", 1), ("platina", 1),
    ]


async def test_seed_is_repeatable(test_db):
    await seed_database(test_db)
    await seed_database(test_db)

    assert len(await member_repository.find_all(test_db)) == 4
    assert len(await exercise_repository.find_all(test_db)) == 3


async def test_seeded_store_serves_statistics(client, db_manager):
    async with db_manager.session() as db:
        await seed_database(db)

    body = (await client.get("/estatisticas")).json()

    assert [s["plan"] for s in body] == ["NORMAL", "PREMIUM", "PLATINA"]
    assert [s["totalMembers"] for s in body] == [2, 1, 1]
    assert body[0]["members"] == [
        {"name": "João Silva", "age": 25}, {"name": "Maria Santos", "age": 30},
    ]
