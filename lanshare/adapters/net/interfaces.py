"""
Network interface address source.

Enumerates the host's interfaces with netifaces and keeps the IPv4
addresses other devices on the LAN can reach (everything but loopback).
"""

from __future__ import annotations

import ipaddress
import logging
from collections.abc import Callable, Iterable

import netifaces

logger = logging.getLogger(__name__)


def _netifaces_ipv4() -> Iterable[str]:
    for interface in netifaces.interfaces():
        addrs = netifaces.ifaddresses(interface)
        for addr in addrs.get(netifaces.AF_INET, []):
            ip = addr.get("addr")
            if ip:
                yield ip


def filter_lan_addresses(candidates: Iterable[str]) -> list[str]:
    """Keep non-loopback IPv4 addresses, preserving order and dropping duplicates."""
    result: list[str] = []
    for raw in candidates:
        try:
            ip = ipaddress.ip_address(raw)
        except ValueError:
            logger.debug("Skipping unparseable interface address %r", raw)
            continue
        if ip.version != 4 or ip.is_loopback:
            continue
        text = str(ip)
        if text not in result:
            result.append(text)
    return result


class InterfaceAddressSource:
    """AddressSourcePort backed by the OS interface table. Never cached."""

    def __init__(self, enumerate_ipv4: Callable[[], Iterable[str]] = _netifaces_ipv4) -> None:
        self._enumerate = enumerate_ipv4

    def list_lan_addresses(self) -> list[str]:
        return filter_lan_addresses(self._enumerate())
