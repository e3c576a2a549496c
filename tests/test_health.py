"""
Health endpoint tests - liveness and readiness probes.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    """GET /api/health returns 200 and status ok."""
    response = await client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"


@pytest.mark.asyncio
async def test_ready(client: AsyncClient):
    """GET /api/health/ready returns 200 when database and search answer."""
    response = await client.get("/api/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "database": True, "search": True}


@pytest.mark.asyncio
async def test_not_ready_when_search_is_down(client: AsyncClient, fake_es):
    fake_es.alive = False
    response = await client.get("/api/health/ready")
    assert response.status_code == 503
    assert response.json()["status"] == "unavailable"
    assert response.json()["search"] is False
