"""
Exceptions raised by the DNS facade and its providers.
"""

from typing import List


class DNSFacadeError(Exception):
    """Base class for all DNS facade errors."""


class ZoneNotFoundError(DNSFacadeError, ValueError):
    """Raised when a zone name cannot be resolved to an identifier.

    Carries the requested name and every zone that was examined, so the
    failure can be diagnosed without listing the backend again.
    """

    def __init__(self, zone_name: str, zones: List):
        self.zone_name = zone_name
        self.zones = list(zones)
        super().__init__(f"zone {zone_name} not found in {self.zones}")


class InvalidZoneIdError(DNSFacadeError, ValueError):
    """Raised for an empty or non-string zone identifier."""

    def __init__(self, zone_id):
        self.zone_id = zone_id
        super().__init__(f"zone id must be a non-empty string, got {zone_id!r}")


class UnknownProviderError(DNSFacadeError):
    """Raised when the configuration names a provider that is not registered."""

    def __init__(self, name: str, known: List[str]):
        self.name = name
        self.known = sorted(known)
        super().__init__(
            f"Unknown provider '{name}', expected one of: {', '.join(self.known)}"
        )


class ProviderError(DNSFacadeError):
    """Raised when a backend call fails."""
