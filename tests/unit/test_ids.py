"""
Identifier generation tests.

Ids must be canonical UUIDs and never collide in practice.
"""

from __future__ import annotations

from uuid import UUID

from lanshare.adapters.ids import generate_id


def test_id_is_canonical_uuid4() -> None:
    """Generated ids round-trip through UUID parsing unchanged."""
    item_id = generate_id()
    parsed = UUID(item_id)
    assert str(parsed) == item_id
    assert parsed.version == 4


def test_million_ids_are_unique() -> None:
    """No collision across 10^6 generated ids."""
    count = 1_000_000
    ids = {generate_id() for _ in range(count)}
    assert len(ids) == count
