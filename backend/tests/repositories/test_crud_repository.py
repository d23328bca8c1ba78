"""Persistence gateway — generic CRUD and the plan join/aggregate reads.

Invariants:
    - find_by_id returns None, update returns None, delete returns False for absent ids
    - update writes only the given keys
    - FK violations surface as ReferenceConflictError, never IntegrityError
"""

import pytest

from app.core.errors import ReferenceConflictError
from app.repositories import exercise_repository, member_repository, plan_repository


@pytest.fixture
async def seeded_plan(test_db):
    return await plan_repository.create(
        test_db, {"name": "normal", "price": 89.90, "trainer": "Balestrin"},
    )


async def test_create_assigns_id(test_db, seeded_plan):
    assert seeded_plan.id is not None
    assert seeded_plan.price == pytest.approx(89.90)


async def test_find_by_id_missing_returns_none(test_db):
    assert await member_repository.find_by_id(test_db, 123) is None


async def test_find_by_id_with_include_loads_relation(test_db, seeded_plan):
    member = await member_repository.create(
        test_db,
        {"name": "Ana Costa", "email": "ana@email.com", "age": 28, "plan_id": seeded_plan.id},
    )
    found = await member_repository.find_by_id(test_db, member.id, include=("plan",))
    assert found.plan.trainer == "Balestrin"


async def test_update_writes_only_given_keys(test_db, seeded_plan):
    updated = await plan_repository.update(test_db, seeded_plan.id, {"trainer": "Carlão"})
    assert updated.trainer == "Carlão"
    assert updated.name == "normal"


async def test_update_missing_returns_none(test_db):
    assert await plan_repository.update(test_db, 404, {"trainer": "Carlão"}) is None


async def test_delete_reports_whether_row_existed(test_db, seeded_plan):
    assert await plan_repository.delete(test_db, seeded_plan.id) is True
    assert await plan_repository.delete(test_db, seeded_plan.id) is False


async def test_dangling_plan_reference_raises_conflict(test_db):
    with pytest.raises(ReferenceConflictError):
        await exercise_repository.create(
            test_db, {"name": "Remada", "description": "Costas com barra", "plan_id": 77},
        )
    assert await exercise_repository.find_all(test_db) == []


async def test_plan_delete_blocked_while_referenced(test_db, seeded_plan):
    await exercise_repository.create(
        test_db, {"name": "Remada", "description": "Costas com barra", "plan_id": seeded_plan.id},
    )
    with pytest.raises(ReferenceConflictError):
        await plan_repository.delete(test_db, seeded_plan.id)
    assert await plan_repository.count_references(test_db, seeded_plan.id) == (0, 1)


async def test_list_with_member_counts(test_db, seeded_plan):
    other = await plan_repository.create(
        test_db, {"name": "premium", "price": 129.90, "trainer": "Leo Stronda"},
    )
    for email in ("joao@email.com", "maria@email.com"):
        await member_repository.create(
            test_db, {"name": "Membro", "email": email, "age": 30, "plan_id": other.id},
        )

    rows = await plan_repository.list_with_member_counts(test_db)

    assert [(plan.name, count) for plan, count in rows] == [("normal", 0), ("premium", 2)]
    assert rows[0][0].exercises == []


async def test_clear_removes_all_rows(test_db, seeded_plan):
    assert await plan_repository.clear(test_db) == 1
    assert await plan_repository.find_all(test_db) == []


@pytest.mark.parametrize("id", [0, -5, 2_147_483_648, 2**63])
async def test_ids_outside_column_range_are_absent(test_db, seeded_plan, id):
    assert await plan_repository.find_by_id(test_db, id) is None
    assert await plan_repository.update(test_db, id, {"trainer": "Carlão"}) is None
    assert await plan_repository.delete(test_db, id) is False
    assert await plan_repository.count_references(test_db, id) == (0, 0)
    assert len(await plan_repository.find_all(test_db)) == 1
