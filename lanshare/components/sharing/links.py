"""
Share link composition.

Functional Core - pure string building, no network access.
"""

from __future__ import annotations

from collections.abc import Iterable

SCHEME = "http"


def compose_link(address: str, port: int, relative_path: str) -> str:
    """
    Build an absolute share URL.

    Leading slashes on ``relative_path`` are ignored, so ``uploads/x.txt``
    and ``/uploads/x.txt`` compose to the same link.

    >>> compose_link("192.168.1.5", 27149, "/uploads/x.txt")
    'http://192.168.1.5:27149/uploads/x.txt'
    """
    return f"{SCHEME}://{address}:{port}/{relative_path.lstrip('/')}"


def compose_links(addresses: Iterable[str], port: int, relative_path: str) -> list[str]:
    """Build one share URL per address, in address order."""
    return [compose_link(address, port, relative_path) for address in addresses]
