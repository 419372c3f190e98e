"""Storage engine and session management."""
from __future__ import annotations

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from ..models.base import Base


def build_engine(url: str) -> Engine:
    """Create a blocking engine for the durable key-value store."""

    connect_args: dict[str, object] = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_engine(url, echo=False, pool_pre_ping=True, connect_args=connect_args)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False, class_=Session)


def init_storage(engine: Engine) -> None:
    """Create storage tables when missing."""

    Base.metadata.create_all(engine)
