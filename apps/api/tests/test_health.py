import pytest


@pytest.mark.asyncio
async def test_health_endpoint(client) -> None:
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_robots(client) -> None:
    robots = await client.get("/robots.txt")

    assert robots.status_code == 200
    assert "User-agent" in robots.text
