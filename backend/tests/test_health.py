"""
MyNotes Backend — Health Check Tests
"""

import pytest


@pytest.mark.asyncio
async def test_health_reports_healthy_store(test_client):
    response = await test_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "connected"
    assert body["uptime_seconds"] >= 0


@pytest.mark.asyncio
async def test_health_reports_unreachable_store(spy_client, spy_store):
    spy_store.ping.return_value = False

    response = await spy_client.get("/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    assert response.json()["database"] == "disconnected"
