"""Statistics route — GET /estatisticas rollups per plan."""

import pytest


async def test_statistics_counts_members_per_plan(
    client, create_plan, create_member, create_exercise,
):
    normal = await create_plan()
    premium = await create_plan(name="premium", price=129.90, trainer="Leo Stronda")
    await create_plan(name="platina", price=199.90, trainer="Carlão")
    await create_member(normal["id"])
    await create_member(normal["id"], name="Maria Santos", email="maria@email.com", age=30)
    await create_member(premium["id"], name="Carlos Oliveira", email="carlos@email.com", age=22)
    await create_exercise(normal["id"])

    res = await client.get("/estatisticas")

    assert res.status_code == 200
    body = res.json()
    assert len(body) == 3
    assert [s["totalMembers"] for s in body] == [2, 1, 0]
    assert [s["plan"] for s in body] == ["NORMAL", "PREMIUM", "PLATINA"]


async def test_statistics_entry_shape(client, plan, create_member, create_exercise):
    await create_member(plan["id"])
    exercise = await create_exercise(plan["id"])

    entry = (await client.get("/estatisticas")).json()[0]

    assert entry["trainer"] == "Balestrin"
    assert entry["price"] == pytest.approx(89.90)
    assert entry["members"] == [{"name": "João Silva", "age": 25}]
    assert entry["exercises"] == [exercise]


async def test_statistics_empty_store(client):
    res = await client.get("/estatisticas")
    assert res.status_code == 200
    assert res.json() == []
