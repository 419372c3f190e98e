"""Process-wide objects built once at startup and handed to routes."""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from fastapi import Request

from ..db.session import build_engine, build_session_factory, init_storage
from ..repositories.storage import KeyValueStore
from ..services.auth import SessionGate
from ..services.overlay import KeyEvents, Overlay
from .config import Settings


@dataclass(slots=True)
class AppState:
    gate: SessionGate
    overlay: Overlay
    keys: KeyEvents


@contextmanager
def open_app_state(settings: Settings) -> Iterator[AppState]:
    """Build storage, session gate and overlay; tear them down on exit."""

    engine = build_engine(settings.storage_url)
    try:
        init_storage(engine)
        store = KeyValueStore(build_session_factory(engine))
        gate = SessionGate(store, login_path=settings.login_path, landing_path=settings.landing_path)
        keys = KeyEvents()
        overlay = Overlay()
        with overlay.mount(keys):
            yield AppState(gate=gate, overlay=overlay, keys=keys)
    finally:
        engine.dispose()


def get_app_state(request: Request) -> AppState:
    return request.app.state.showcase


def get_gate(request: Request) -> SessionGate:
    """FastAPI dependency returning the session gate."""

    return get_app_state(request).gate


def get_overlay(request: Request) -> Overlay:
    """FastAPI dependency returning the overlay."""

    return get_app_state(request).overlay


def get_keys(request: Request) -> KeyEvents:
    return get_app_state(request).keys
