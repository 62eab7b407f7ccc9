"""
Record-set APIs and the factories that bind them to a zone.

Basic and all-profile APIs are available from every provider. Geo and
weighted APIs are optional: their factories decide once, from the
provider descriptor, whether ``create`` hands out an API or ``None``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional

from .model import ResourceRecordSet
from .provider import Provider
from ..utils.validators import check_zone_id

logger = logging.getLogger(__name__)


class ResourceRecordSetApi(ABC):
    """Basic record sets (no qualifier) in one zone."""

    def __init__(self, zone_id: str):
        self.zone_id = zone_id

    @abstractmethod
    def __iter__(self) -> Iterator[ResourceRecordSet]:
        pass

    def iterate_by_name(self, name: str) -> Iterator[ResourceRecordSet]:
        return (rrset for rrset in self if rrset.name == name)

    def get_by_name_and_type(self, name: str, type: str) -> Optional[ResourceRecordSet]:
        for rrset in self.iterate_by_name(name):
            if rrset.type == type.upper():
                return rrset
        return None

    @abstractmethod
    def put(self, rrset: ResourceRecordSet) -> None:
        """Create or replace the record set with the same name and type."""
        pass

    @abstractmethod
    def delete_by_name_and_type(self, name: str, type: str) -> None:
        """Remove the record set, if present."""
        pass


class QualifiedResourceRecordSetApi(ABC):
    """Record sets that may carry a qualifier, in one zone."""

    def __init__(self, zone_id: str):
        self.zone_id = zone_id

    @abstractmethod
    def __iter__(self) -> Iterator[ResourceRecordSet]:
        pass

    def iterate_by_name(self, name: str) -> Iterator[ResourceRecordSet]:
        return (rrset for rrset in self if rrset.name == name)

    def iterate_by_name_and_type(self, name: str, type: str) -> Iterator[ResourceRecordSet]:
        return (rrset for rrset in self.iterate_by_name(name) if rrset.type == type.upper())

    def get_by_name_type_and_qualifier(
        self, name: str, type: str, qualifier: str
    ) -> Optional[ResourceRecordSet]:
        for rrset in self.iterate_by_name_and_type(name, type):
            if rrset.qualifier == qualifier:
                return rrset
        return None

    @abstractmethod
    def put(self, rrset: ResourceRecordSet) -> None:
        """Create or replace the record set with the same name, type and qualifier."""
        pass

    @abstractmethod
    def delete_by_name_type_and_qualifier(self, name: str, type: str, qualifier: str) -> None:
        """Remove the record set, if present."""
        pass


class AllProfileResourceRecordSetApi(QualifiedResourceRecordSetApi):
    """Every record set in the zone, basic or not.

    Providers without profiles return only basic record sets here.
    """


class GeoResourceRecordSetApi(QualifiedResourceRecordSetApi):
    """Record sets answered according to the territory of the caller."""

    @abstractmethod
    def supported_regions(self) -> Dict[str, List[str]]:
        """Region names mapped to the territories they may contain."""
        pass


class WeightedResourceRecordSetApi(QualifiedResourceRecordSetApi):
    """Record sets answered in proportion to their weight."""

    @abstractmethod
    def supported_weights(self) -> List[int]:
        pass


class ApiFactory(ABC):
    """Binds an API to a zone id. Always supported."""

    def create(self, zone_id: str):
        check_zone_id(zone_id)
        api = self._create(zone_id)
        logger.debug(f"Created {type(api).__name__} for zone {zone_id}")
        return api

    @abstractmethod
    def _create(self, zone_id: str):
        pass


class OptionalApiFactory(ABC):
    """Binds an API to a zone id, or returns None if the provider lacks it."""

    #: Provider capability gating this factory, e.g. ``"geo"``.
    capability = None

    def __init__(self, provider: Provider):
        self.supported = provider.supports(self.capability)

    def create(self, zone_id: str):
        check_zone_id(zone_id)
        if not self.supported:
            return None
        api = self._create(zone_id)
        logger.debug(f"Created {type(api).__name__} for zone {zone_id}")
        return api

    @abstractmethod
    def _create(self, zone_id: str):
        pass


class ResourceRecordSetApiFactory(ApiFactory):
    @abstractmethod
    def _create(self, zone_id: str) -> ResourceRecordSetApi:
        pass


class AllProfileResourceRecordSetApiFactory(ApiFactory):
    @abstractmethod
    def _create(self, zone_id: str) -> AllProfileResourceRecordSetApi:
        pass


class GeoResourceRecordSetApiFactory(OptionalApiFactory):
    capability = "geo"

    @abstractmethod
    def _create(self, zone_id: str) -> GeoResourceRecordSetApi:
        pass


class WeightedResourceRecordSetApiFactory(OptionalApiFactory):
    capability = "weighted"

    @abstractmethod
    def _create(self, zone_id: str) -> WeightedResourceRecordSetApi:
        pass


class UnsupportedGeoFactory(GeoResourceRecordSetApiFactory):
    """Geo factory for providers without geo record sets."""

    def __init__(self, provider: Provider = None):
        self.supported = False

    def _create(self, zone_id: str):
        return None


class UnsupportedWeightedFactory(WeightedResourceRecordSetApiFactory):
    """Weighted factory for providers without weighted record sets."""

    def __init__(self, provider: Provider = None):
        self.supported = False

    def _create(self, zone_id: str):
        return None
