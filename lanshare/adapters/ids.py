"""Identifier generation for stored items."""

from __future__ import annotations

from collections.abc import Callable
from uuid import uuid4

IdGenerator = Callable[[], str]


def generate_id() -> str:
    """Return a random 128-bit identifier in canonical UUID form."""
    return str(uuid4())
