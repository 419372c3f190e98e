"""Blocking key-value access over the ``stored_values`` table."""
from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from ..models.stored_value import StoredValue


class KeyValueStore:
    """Very small durable string store: read, write on set, delete on clear."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        with self._session_factory() as session:
            entry = session.get(StoredValue, key)
            return entry.value if entry is not None else None

    def set(self, key: str, value: str) -> None:
        with self._session_factory.begin() as session:
            entry = session.get(StoredValue, key)
            if entry is None:
                session.add(StoredValue(key=key, value=value))
            else:
                entry.value = value

    def delete(self, key: str) -> None:
        with self._session_factory.begin() as session:
            entry = session.get(StoredValue, key)
            if entry is not None:
                session.delete(entry)
