"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores zones and record sets
in memory for safe testing and demonstration purposes. Its capabilities
are taken from configuration, so it can stand in for any real backend.
"""

import logging
from typing import Dict, Iterator, List, Optional

from .base_provider import DNSProvider
from ..core.model import ResourceRecordSet, Zone
from ..core.provider import Provider
from ..core.record_sets import (
    AllProfileResourceRecordSetApi,
    AllProfileResourceRecordSetApiFactory,
    GeoResourceRecordSetApi,
    GeoResourceRecordSetApiFactory,
    QualifiedResourceRecordSetApi,
    ResourceRecordSetApi,
    ResourceRecordSetApiFactory,
    WeightedResourceRecordSetApi,
    WeightedResourceRecordSetApiFactory,
)
from ..core.zones import ZoneApi

logger = logging.getLogger(__name__)

SUPPORTED_REGIONS = {
    "Europe": ["Germany", "France", "Spain", "United Kingdom"],
    "North America": ["Canada", "Mexico", "United States"],
    "South America": ["Argentina", "Brazil", "Chile"],
    "Asia": ["India", "Japan", "Singapore"],
}

SUPPORTED_WEIGHTS = list(range(0, 101))


class MockZoneApi(ZoneApi):
    """Zones held in memory; counts how often they were listed."""

    def __init__(self, zones: List[Zone]):
        self._zones = zones
        self.listings = 0

    def __iter__(self) -> Iterator[Zone]:
        self.listings += 1
        logger.debug(f"Mock: Listing {len(self._zones)} zones")
        return iter(list(self._zones))


class MockResourceRecordSetApi(ResourceRecordSetApi):
    def __init__(self, store: Dict[str, List[ResourceRecordSet]], zone_id: str):
        super().__init__(zone_id)
        self._store = store

    def __iter__(self) -> Iterator[ResourceRecordSet]:
        return iter([r for r in self._store.get(self.zone_id, []) if r.is_basic])

    def put(self, rrset: ResourceRecordSet) -> None:
        if not rrset.is_basic:
            raise ValueError(f"Record set {rrset.name} {rrset.type} is not a basic record set")
        records = self._store.setdefault(self.zone_id, [])
        for i, existing in enumerate(records):
            if existing.is_basic and (existing.name, existing.type) == (rrset.name, rrset.type):
                records[i] = rrset
                logger.info(f"Mock: Replaced {rrset.name} {rrset.type} in {self.zone_id}")
                return
        records.append(rrset)
        logger.info(f"Mock: Created {rrset.name} {rrset.type} in {self.zone_id}")

    def delete_by_name_and_type(self, name: str, type: str) -> None:
        records = self._store.get(self.zone_id, [])
        for i, existing in enumerate(records):
            if existing.is_basic and (existing.name, existing.type) == (name, type.upper()):
                del records[i]
                logger.info(f"Mock: Deleted {name} {type} from {self.zone_id}")
                return


class _MockQualifiedApi(QualifiedResourceRecordSetApi):
    """Record sets of the zone that this API's profile accepts."""

    def __init__(self, store: Dict[str, List[ResourceRecordSet]], zone_id: str):
        super().__init__(zone_id)
        self._store = store

    def _accepts(self, rrset: ResourceRecordSet) -> bool:
        return True

    def __iter__(self) -> Iterator[ResourceRecordSet]:
        return iter([r for r in self._store.get(self.zone_id, []) if self._accepts(r)])

    def put(self, rrset: ResourceRecordSet) -> None:
        if not self._accepts(rrset):
            raise ValueError(
                f"Record set {rrset.name} {rrset.type} does not belong to {type(self).__name__}"
            )
        key = (rrset.name, rrset.type, rrset.qualifier)
        records = self._store.setdefault(self.zone_id, [])
        for i, existing in enumerate(records):
            if (existing.name, existing.type, existing.qualifier) == key:
                records[i] = rrset
                logger.info(f"Mock: Replaced {rrset.name} {rrset.type} {rrset.qualifier}")
                return
        records.append(rrset)
        logger.info(f"Mock: Created {rrset.name} {rrset.type} {rrset.qualifier}")

    def delete_by_name_type_and_qualifier(self, name: str, type: str, qualifier: str) -> None:
        key = (name, type.upper(), qualifier)
        records = self._store.get(self.zone_id, [])
        for i, existing in enumerate(records):
            if self._accepts(existing) and (existing.name, existing.type, existing.qualifier) == key:
                del records[i]
                logger.info(f"Mock: Deleted {name} {type} {qualifier}")
                return


class MockAllProfileResourceRecordSetApi(_MockQualifiedApi, AllProfileResourceRecordSetApi):
    pass


class MockGeoResourceRecordSetApi(_MockQualifiedApi, GeoResourceRecordSetApi):
    def _accepts(self, rrset: ResourceRecordSet) -> bool:
        return rrset.geo is not None

    def supported_regions(self) -> Dict[str, List[str]]:
        return {region: list(territories) for region, territories in SUPPORTED_REGIONS.items()}


class MockWeightedResourceRecordSetApi(_MockQualifiedApi, WeightedResourceRecordSetApi):
    def _accepts(self, rrset: ResourceRecordSet) -> bool:
        return rrset.weighted is not None

    def supported_weights(self) -> List[int]:
        return list(SUPPORTED_WEIGHTS)


class MockResourceRecordSetApiFactory(ResourceRecordSetApiFactory):
    def __init__(self, store):
        self._store = store

    def _create(self, zone_id: str) -> MockResourceRecordSetApi:
        return MockResourceRecordSetApi(self._store, zone_id)


class MockAllProfileResourceRecordSetApiFactory(AllProfileResourceRecordSetApiFactory):
    def __init__(self, store):
        self._store = store

    def _create(self, zone_id: str) -> MockAllProfileResourceRecordSetApi:
        return MockAllProfileResourceRecordSetApi(self._store, zone_id)


class MockGeoResourceRecordSetApiFactory(GeoResourceRecordSetApiFactory):
    def __init__(self, provider: Provider, store):
        super().__init__(provider)
        self._store = store

    def _create(self, zone_id: str) -> MockGeoResourceRecordSetApi:
        return MockGeoResourceRecordSetApi(self._store, zone_id)


class MockWeightedResourceRecordSetApiFactory(WeightedResourceRecordSetApiFactory):
    def __init__(self, provider: Provider, store):
        super().__init__(provider)
        self._store = store

    def _create(self, zone_id: str) -> MockWeightedResourceRecordSetApi:
        return MockWeightedResourceRecordSetApi(self._store, zone_id)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    @classmethod
    def describe(cls, config: Optional[Dict] = None) -> Provider:
        """Capabilities come from the configuration section."""
        config = config or {}
        return Provider(
            name="mock",
            url="mem:mock",
            supports_duplicate_zone_names=config.get("supports_duplicate_zone_names", False),
            supports_geo=config.get("supports_geo", True),
            supports_weighted=config.get("supports_weighted", True),
        )

    def __init__(self, config: Optional[Dict] = None):
        """Initialize mock provider from its configuration section."""
        config = config or {}
        self._provider = self.describe(config)
        self.zone_list = [Zone(name=z["name"], id=z.get("id")) for z in config.get("zones") or []]
        self.record_sets: Dict[str, List[ResourceRecordSet]] = {
            str(zone_id): [ResourceRecordSet.from_dict(r) for r in rrsets or []]
            for zone_id, rrsets in (config.get("record_sets") or {}).items()
        }
        self._zone_api = MockZoneApi(self.zone_list)
        logger.info(
            f"Mock DNS provider initialized with {len(self.zone_list)} zones"
        )

    @property
    def provider(self) -> Provider:
        return self._provider

    def zones(self) -> MockZoneApi:
        return self._zone_api

    def basic_record_set_api_factory(self) -> MockResourceRecordSetApiFactory:
        return MockResourceRecordSetApiFactory(self.record_sets)

    def all_profile_record_set_api_factory(self) -> MockAllProfileResourceRecordSetApiFactory:
        return MockAllProfileResourceRecordSetApiFactory(self.record_sets)

    def geo_record_set_api_factory(self) -> MockGeoResourceRecordSetApiFactory:
        return MockGeoResourceRecordSetApiFactory(self._provider, self.record_sets)

    def weighted_record_set_api_factory(self) -> MockWeightedResourceRecordSetApiFactory:
        return MockWeightedResourceRecordSetApiFactory(self._provider, self.record_sets)
