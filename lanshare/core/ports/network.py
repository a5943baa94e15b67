from typing import Protocol


class AddressSourcePort(Protocol):
    def list_lan_addresses(self) -> list[str]:
        """Return the host's non-loopback IPv4 addresses (may be empty)."""
        ...
