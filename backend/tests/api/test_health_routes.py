"""Health routes — liveness never touches storage, readiness does."""

from app.main import app


async def test_health_returns_fixed_payload(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "OK", "message": "API Academia funcionando!"}


async def test_health_does_not_need_database(client):
    app.state.db_manager = None
    res = await client.get("/health")
    assert res.status_code == 200


async def test_readiness_reports_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_returns_503_when_database_down(client, db_manager, monkeypatch):
    async def _down():
        return False

    monkeypatch.setattr(db_manager, "health_check", _down)

    res = await client.get("/health/ready")

    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
