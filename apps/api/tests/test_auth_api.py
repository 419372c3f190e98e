"""HTTP tests for sign-in and the protected dashboard."""
from __future__ import annotations

import pytest

from showcase.main import create_app


@pytest.mark.asyncio
async def test_dashboard_redirects_then_returns_after_login(client) -> None:
    blocked = await client.get("/api/dashboard")

    assert blocked.status_code == 307
    assert blocked.headers["location"] == "/auth/login?next=%2Fapi%2Fdashboard"

    login = await client.post(
        "/auth/login",
        json={"email": "ada@kinglawparadise.com", "password": "secret", "next": "/api/dashboard"},
    )
    assert login.status_code == 200
    assert login.json() == {"email": "ada@kinglawparadise.com", "redirect_to": "/api/dashboard"}

    allowed = await client.get("/api/dashboard")
    assert allowed.status_code == 200
    assert allowed.json()["email"] == "ada@kinglawparadise.com"


@pytest.mark.asyncio
async def test_login_without_next_lands_on_default(client) -> None:
    response = await client.post("/auth/login", json={"email": "ada@kinglawparadise.com", "password": "x"})

    assert response.json()["redirect_to"] == "/api/dashboard"


@pytest.mark.asyncio
async def test_register_signs_in(client) -> None:
    response = await client.post(
        "/auth/register",
        json={"first_name": "Ada", "last_name": "Obi", "email": "ada@kinglawparadise.com", "password": "x"},
    )
    me = await client.get("/auth/me")

    assert response.status_code == 200
    assert me.json() == {"identity": {"email": "ada@kinglawparadise.com"}}


@pytest.mark.asyncio
async def test_invalid_email_is_rejected(client) -> None:
    response = await client.post("/auth/login", json={"email": "not-an-email", "password": "x"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_logout_clears_identity(client) -> None:
    await client.post("/auth/login", json={"email": "ada@kinglawparadise.com", "password": "x"})

    response = await client.post("/auth/logout")
    me = await client.get("/auth/me")

    assert response.status_code == 204
    assert me.json() == {"identity": None}


@pytest.mark.asyncio
async def test_session_restored_on_restart(client, settings) -> None:
    await client.post("/auth/login", json={"email": "ada@kinglawparadise.com", "password": "x"})

    restarted = create_app(settings)
    async with restarted.router.lifespan_context(restarted):
        identity = restarted.state.showcase.gate.current_identity()

    assert identity is not None
    assert identity.email == "ada@kinglawparadise.com"


@pytest.mark.asyncio
async def test_sign_in_page_skips_form_when_signed_in(client) -> None:
    form = await client.get("/auth/login", params={"next": "/api/dashboard"})
    assert form.status_code == 200
    assert form.json()["next"] == "/api/dashboard"

    await client.post("/auth/login", json={"email": "ada@kinglawparadise.com", "password": "x"})
    skipped = await client.get("/auth/login", params={"next": "/api/dashboard"})

    assert skipped.status_code == 307
    assert skipped.headers["location"] == "/api/dashboard"


@pytest.mark.asyncio
async def test_login_ignores_off_site_return_target(client) -> None:
    response = await client.post(
        "/auth/login",
        json={"email": "ada@kinglawparadise.com", "password": "x", "next": "/\\evil.example"},
    )

    assert response.json()["redirect_to"] == "/api/dashboard"
