"""Exercises routes — CRUD over /exercicios."""

import pytest


async def test_create_and_get_exercise(client, plan):
    res = await client.post(
        "/exercicios",
        json={"name": "Barra Fixa", "description": "Para desenvolvimento dorsal", "planId": plan["id"]},
    )
    assert res.status_code == 201
    created = res.json()

    body = (await client.get(f"/exercicios/{created['id']}")).json()

    assert body["name"] == "Barra Fixa"
    assert body["description"] == "Para desenvolvimento dorsal"
    assert body["plan"]["id"] == plan["id"]


@pytest.mark.parametrize("override, field", [
    ({"name": "Ab"}, "body.name"),
    ({"description": "Curt"}, "body.description"),
    ({"description": "x" * 501}, "body.description"),
    ({"planId": -1}, "body.planId"),
])
async def test_create_exercise_rejects_invalid_field(client, plan, override, field):
    payload = {"name": "Supino Reto", "description": "Desenvolvimento para peitoral", "planId": plan["id"]}
    payload.update(override)

    res = await client.post("/exercicios", json=payload)

    assert res.status_code == 400
    assert field in [d["field"] for d in res.json()["error"]["details"]]
    assert (await client.get("/exercicios")).json() == []


async def test_create_exercise_with_unknown_plan_returns_409(client):
    res = await client.post(
        "/exercicios",
        json={"name": "Supino Reto", "description": "Desenvolvimento para peitoral", "planId": 42},
    )
    assert res.status_code == 409


async def test_list_exercises(client, plan, create_exercise):
    await create_exercise(plan["id"])
    await create_exercise(plan["id"], name="Barra Fixa", description="Para desenvolvimento dorsal")

    body = (await client.get("/exercicios")).json()

    assert [e["name"] for e in body] == ["Supino Reto", "Barra Fixa"]


async def test_partial_update_exercise(client, plan, create_exercise):
    exercise = await create_exercise(plan["id"])

    res = await client.put(
        f"/exercicios/{exercise['id']}", json={"description": "Peitoral com barra"},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["description"] == "Peitoral com barra"
    assert body["name"] == "Supino Reto"
    assert body["planId"] == plan["id"]


async def test_update_missing_exercise_returns_404(client):
    res = await client.put("/exercicios/999", json={"name": "Remada"})
    assert res.status_code == 404


async def test_delete_exercise(client, plan, create_exercise):
    exercise = await create_exercise(plan["id"])

    res = await client.delete(f"/exercicios/{exercise['id']}")

    assert res.status_code == 200
    assert res.json() == {"message": "Exercício deletado"}


async def test_delete_missing_exercise_returns_404(client):
    res = await client.delete("/exercicios/999")
    assert res.status_code == 404


async def test_get_missing_exercise_returns_404(client):
    res = await client.get("/exercicios/999")
    assert res.status_code == 404


@pytest.mark.parametrize("exercise_id", [-1, 9_223_372_036_854_775_808])
async def test_out_of_range_exercise_id_is_not_found(client, exercise_id):
    assert (await client.get(f"/exercicios/{exercise_id}")).status_code == 404
    assert (await client.put(f"/exercicios/{exercise_id}", json={"name": "Remada"})).status_code == 404
    assert (await client.delete(f"/exercicios/{exercise_id}")).status_code == 404


async def test_update_with_oversized_plan_id_returns_400(client, plan, create_exercise):
    exercise = await create_exercise(plan["id"])

    res = await client.put(f"/exercicios/{exercise['id']}", json={"planId": 2**63})

    assert res.status_code == 400
    assert (await client.get(f"/exercicios/{exercise['id']}")).json()["planId"] == plan["id"]
