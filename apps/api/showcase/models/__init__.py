"""Expose ORM models."""
from .base import Base
from .stored_value import StoredValue

__all__ = [
    "Base",
    "StoredValue",
]
