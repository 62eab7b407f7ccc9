"""
Model - zones and resource record sets

Plain value objects handed out by providers. Record data itself is kept
as provider-formatted rdata strings; the facade never interprets it.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..utils.validators import validate_ttl


@dataclass(frozen=True)
class Zone:
    """A DNS zone such as ``denominator.io.``.

    ``id`` is only set by providers that assign their own identifiers.
    """

    name: str
    id: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("zone name must not be empty")
        # Configuration may hand over numeric ids
        if self.id is not None and not isinstance(self.id, str):
            object.__setattr__(self, "id", str(self.id))

    @property
    def id_or_name(self) -> str:
        """The value to pass to the facade's record-set operations."""
        return self.id if self.id is not None else self.name

    def __str__(self):
        if self.id is None:
            return self.name
        return f"{self.name} ({self.id})"


def name_equal_to(name: str):
    """Predicate matching zones by exact, case-sensitive name."""
    return lambda zone: zone.name == name


@dataclass(frozen=True)
class Geo:
    """Directional profile: region name to the territories it covers."""

    regions: Dict[str, List[str]]

    def __post_init__(self):
        if not self.regions:
            raise ValueError("geo profile must name at least one region")


@dataclass(frozen=True)
class Weighted:
    """Load-balancing profile."""

    weight: int

    def __post_init__(self):
        if isinstance(self.weight, bool) or not isinstance(self.weight, int) or self.weight < 0:
            raise ValueError(f"weight must be a non-negative integer, got {self.weight!r}")


@dataclass
class ResourceRecordSet:
    """Records sharing a name and type, optionally distinguished by a qualifier."""

    name: str
    type: str
    qualifier: Optional[str] = None
    ttl: Optional[int] = None
    records: List[str] = field(default_factory=list)
    geo: Optional[Geo] = None
    weighted: Optional[Weighted] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("record set name must not be empty")
        if not self.type:
            raise ValueError("record set type must not be empty")
        self.type = self.type.upper()
        if self.ttl is not None and not validate_ttl(self.ttl):
            raise ValueError(f"invalid ttl {self.ttl!r} for {self.name}")
        if (self.geo is not None or self.weighted is not None) and not self.qualifier:
            raise ValueError(f"record set {self.name} {self.type} with a profile needs a qualifier")

    @property
    def is_basic(self) -> bool:
        return self.qualifier is None

    @classmethod
    def from_dict(cls, data: Dict) -> "ResourceRecordSet":
        """Build a record set from a configuration mapping."""
        geo = data.get("geo")
        weighted = data.get("weighted")
        return cls(
            name=data["name"],
            type=data["type"],
            qualifier=data.get("qualifier"),
            ttl=data.get("ttl"),
            records=[str(r) for r in data.get("records", [])],
            geo=Geo(regions=geo) if geo else None,
            weighted=Weighted(weight=weighted) if weighted is not None else None,
        )

    def to_dict(self) -> Dict:
        data = {"name": self.name, "type": self.type, "records": list(self.records)}
        if self.qualifier is not None:
            data["qualifier"] = self.qualifier
        if self.ttl is not None:
            data["ttl"] = self.ttl
        if self.geo is not None:
            data["geo"] = {k: list(v) for k, v in self.geo.regions.items()}
        if self.weighted is not None:
            data["weighted"] = self.weighted.weight
        return data
