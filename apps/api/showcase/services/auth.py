"""Signed-in identity, its persistence, and access gating."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Callable, Protocol, TypeVar
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

SESSION_KEY = "auth:user"

T = TypeVar("T")


class SessionStorage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MalformedSessionError(ValueError):
    """Persisted session record could not be decoded."""


@dataclass(frozen=True, slots=True)
class Identity:
    email: str


@dataclass(frozen=True, slots=True)
class Redirect:
    """Instruction to navigate to ``location``, optionally returning later."""

    location: str
    return_to: str | None = None


class SessionGate:
    """Owns the current identity and gates protected content.

    Every mutation is written through to ``storage`` immediately, so a new
    gate built over the same storage restores the last state.
    """

    def __init__(
        self,
        storage: SessionStorage,
        *,
        login_path: str = "/auth/login",
        landing_path: str = "/api/dashboard",
    ) -> None:
        self._storage = storage
        self._login_path = login_path
        self._landing_path = landing_path
        self._identity: Identity | None = None
        self.restore()

    def restore(self) -> Identity | None:
        """Reload the identity from storage; bad records mean signed out."""

        raw = self._storage.get(SESSION_KEY)
        if raw is None:
            self._identity = None
            return None
        try:
            self._identity = decode_identity(raw)
        except MalformedSessionError as exc:
            logger.warning("Ignoring persisted session: %s", exc)
            self._identity = None
        return self._identity

    def current_identity(self) -> Identity | None:
        return self._identity

    def login(self, identity: Identity) -> Identity:
        # No credential check; a verifier would plug in here.
        self._identity = identity
        self._storage.set(SESSION_KEY, encode_identity(identity))
        logger.info("Signed in %s", identity.email)
        return identity

    def logout(self) -> None:
        if self._identity is not None:
            logger.info("Signed out %s", self._identity.email)
        self._identity = None
        self._storage.delete(SESSION_KEY)

    def guard(self, requested_path: str, render: Callable[[], T]) -> T | Redirect:
        """Render protected content, or redirect to sign-in remembering the path."""

        if self._identity is None:
            return Redirect(location=self._login_path, return_to=requested_path)
        return render()

    def post_login_destination(self, return_to: str | None = None) -> str:
        """Where to go after sign-in: the remembered path, else the landing page."""

        if return_to and is_local_path(return_to):
            return return_to
        return self._landing_path


def is_local_path(path: str) -> bool:
    """True for a same-site absolute path such as ``/api/dashboard``.

    Browsers read a backslash as a slash and drop tabs and newlines, so any
    path that would resolve to another host is rejected.
    """

    if not path.startswith("/") or any(ord(char) < 0x20 or ord(char) == 0x7F for char in path):
        return False
    parts = urlsplit(path.replace("\\", "/"))
    return not parts.scheme and not parts.netloc


def encode_identity(identity: Identity) -> str:
    return json.dumps({"email": identity.email})


def decode_identity(raw: str) -> Identity:
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as exc:
        raise MalformedSessionError("not valid JSON") from exc

    if not isinstance(payload, dict):
        raise MalformedSessionError("expected an object")
    email = payload.get("email")
    if not isinstance(email, str) or not email:
        raise MalformedSessionError("missing email")
    return Identity(email=email)
