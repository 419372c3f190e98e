"""HTTP tests for catalog browsing."""
from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_lists_categories(client) -> None:
    response = await client.get("/api/catalog")

    assert response.status_code == 200
    categories = {item["slug"]: item for item in response.json()["categories"]}
    assert list(categories) == [
        "properties",
        "lands",
        "rentals",
        "materials",
        "artifacts",
        "plans",
        "designs",
        "construction",
    ]
    assert categories["properties"]["supports_beds"] is True
    assert categories["lands"]["supports_price"] is True
    assert categories["lands"]["item_count"] == 7


@pytest.mark.asyncio
async def test_text_search_preserves_order(client) -> None:
    response = await client.get("/api/catalog/designs", params={"q": "  ELEVATION "})

    body = response.json()
    assert response.status_code == 200
    assert [card["index"] for card in body["results"]] == [0, 1, 4]
    assert body["filters"]["q"] == "ELEVATION"
    assert body["total"] == 5


@pytest.mark.asyncio
async def test_beds_filter_on_properties(client) -> None:
    response = await client.get("/api/catalog/properties", params={"min_beds": 4})

    titles = [card["title"] for card in response.json()["results"]]
    assert titles == ["4-Bed Duplex • Benin City"]


@pytest.mark.asyncio
async def test_price_floor_excludes_contact_agent_listings(client) -> None:
    response = await client.get("/api/catalog/lands", params={"min_price": 100000})

    assert response.status_code == 200
    assert response.json()["results"] == []


@pytest.mark.asyncio
async def test_unsupported_filters_are_ignored(client) -> None:
    response = await client.get("/api/catalog/materials", params={"min_price": 1, "min_beds": 3})

    body = response.json()
    assert len(body["results"]) == 7
    assert body["filters"]["min_price"] is None
    assert body["filters"]["min_beds"] is None


@pytest.mark.asyncio
async def test_unknown_category_is_404(client) -> None:
    response = await client.get("/api/catalog/yachts")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_negative_bound_is_rejected(client) -> None:
    response = await client.get("/api/catalog/properties", params={"max_price": -5})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_listing_detail(client) -> None:
    found = await client.get("/api/catalog/properties/0")
    missing = await client.get("/api/catalog/properties/99")

    assert found.status_code == 200
    assert found.json()["bed_count"] == 4
    assert found.json()["price"] is None
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_services(client) -> None:
    response = await client.get("/api/services")

    assert "Land Verification" in response.json()["services"]
