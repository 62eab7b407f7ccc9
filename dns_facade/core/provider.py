"""
Provider descriptor - static capabilities of a DNS backend.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

DEFAULT_BASIC_RECORD_TYPES = frozenset(
    ["A", "AAAA", "CNAME", "MX", "NS", "PTR", "SOA", "SPF", "SRV", "TXT"]
)


@dataclass(frozen=True)
class Provider:
    """Immutable capability profile of a DNS backend.

    ``supports_duplicate_zone_names`` tells the facade that zone names are not
    unique on this backend, so callers' names have to be resolved to ids.
    Additional named capabilities can be declared through ``capabilities``.
    """

    name: str
    url: Optional[str] = None
    supports_duplicate_zone_names: bool = False
    supports_geo: bool = False
    supports_weighted: bool = False
    basic_record_types: FrozenSet[str] = DEFAULT_BASIC_RECORD_TYPES
    capabilities: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.name:
            raise ValueError("provider name must not be empty")
        # Accept any iterable from configuration, store frozensets
        object.__setattr__(self, "basic_record_types", frozenset(self.basic_record_types))
        object.__setattr__(self, "capabilities", frozenset(self.capabilities))

    def supports(self, capability: str) -> bool:
        """Return True if the backend supports the named capability."""
        flags = {
            "duplicate_zone_names": self.supports_duplicate_zone_names,
            "geo": self.supports_geo,
            "weighted": self.supports_weighted,
        }
        if capability in flags:
            return flags[capability]
        return capability in self.capabilities

