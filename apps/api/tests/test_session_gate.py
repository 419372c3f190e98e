"""Tests for identity persistence and the protected-area guard."""
from __future__ import annotations

import pytest

from showcase.db.session import build_engine, build_session_factory, init_storage
from showcase.repositories.storage import KeyValueStore
from showcase.services.auth import (
    SESSION_KEY,
    Identity,
    MalformedSessionError,
    Redirect,
    SessionGate,
    decode_identity,
)


@pytest.fixture
def restart(storage_url: str):
    """Simulate a fresh process over the same storage file."""

    engines = []

    def _restart() -> SessionGate:
        engine = build_engine(storage_url)
        engines.append(engine)
        init_storage(engine)
        return SessionGate(KeyValueStore(build_session_factory(engine)))

    yield _restart
    for engine in engines:
        engine.dispose()


def test_starts_signed_out(kv_store) -> None:
    gate = SessionGate(kv_store)

    assert gate.current_identity() is None


def test_login_survives_restart(kv_store, restart) -> None:
    gate = SessionGate(kv_store)
    gate.login(Identity(email="a@b.com"))

    assert kv_store.get(SESSION_KEY) == '{"email": "a@b.com"}'

    restored = restart()
    assert restored.current_identity() == Identity(email="a@b.com")


def test_logout_survives_restart(kv_store, restart) -> None:
    gate = SessionGate(kv_store)
    gate.login(Identity(email="a@b.com"))
    gate.logout()

    assert kv_store.get(SESSION_KEY) is None
    assert restart().current_identity() is None


def test_logout_when_signed_out_is_harmless(kv_store) -> None:
    gate = SessionGate(kv_store)

    gate.logout()

    assert gate.current_identity() is None


@pytest.mark.parametrize(
    "raw",
    ["not json", "[1, 2]", '{"name": "x"}', '{"email": 5}', "null", "[" * 100000],
)
def test_malformed_record_means_signed_out(kv_store, raw, caplog) -> None:
    kv_store.set(SESSION_KEY, raw)

    gate = SessionGate(kv_store)

    assert gate.current_identity() is None
    assert "Ignoring persisted session" in caplog.text


def test_decode_identity_rejects_garbage() -> None:
    with pytest.raises(MalformedSessionError):
        decode_identity("{")


def test_guard_redirects_with_return_target(kv_store) -> None:
    gate = SessionGate(kv_store, login_path="/auth/login")

    outcome = gate.guard("/dashboard/orders", lambda: "secret")

    assert outcome == Redirect(location="/auth/login", return_to="/dashboard/orders")


def test_guard_renders_when_signed_in(kv_store) -> None:
    gate = SessionGate(kv_store)
    gate.login(Identity(email="a@b.com"))

    assert gate.guard("/dashboard", lambda: "secret") == "secret"


def test_return_to_requested_path_after_login(kv_store) -> None:
    gate = SessionGate(kv_store, landing_path="/dashboard")

    redirect = gate.guard("/dashboard/orders", lambda: "secret")
    assert isinstance(redirect, Redirect)

    gate.login(Identity(email="a@b.com"))

    assert gate.post_login_destination(redirect.return_to) == "/dashboard/orders"
    assert gate.guard(redirect.return_to, lambda: "secret") == "secret"


@pytest.mark.parametrize(
    "return_to",
    [
        None,
        "",
        "https://evil.example",
        "//evil.example",
        "/\\evil.example",
        "/\t/evil.example",
        "/\n/evil.example",
        "dashboard",
    ],
)
def test_default_landing_without_local_return_target(kv_store, return_to) -> None:
    gate = SessionGate(kv_store, landing_path="/dashboard")

    assert gate.post_login_destination(return_to) == "/dashboard"


@pytest.mark.parametrize("return_to", ["/dashboard/orders", "/api/catalog/lands?q=benin", "/a//b"])
def test_local_return_targets_are_kept(kv_store, return_to) -> None:
    gate = SessionGate(kv_store, landing_path="/dashboard")

    assert gate.post_login_destination(return_to) == return_to
