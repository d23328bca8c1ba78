"""Route test fixtures — create rows through the API itself."""

import pytest


@pytest.fixture
def create_plan(client):
    async def _create(name="normal", price=89.90, trainer="Balestrin"):
        res = await client.post(
            "/planos", json={"name": name, "price": price, "trainer": trainer},
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
def create_member(client):
    async def _create(plan_id, name="João Silva", email="joao@email.com", age=25):
        res = await client.post(
            "/membros",
            json={"name": name, "email": email, "age": age, "planId": plan_id},
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
def create_exercise(client):
    async def _create(plan_id, name="Supino Reto", description="Desenvolvimento para peitoral"):
        res = await client.post(
            "/exercicios",
            json={"name": name, "description": description, "planId": plan_id},
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _create


@pytest.fixture
async def plan(create_plan):
    return await create_plan()
