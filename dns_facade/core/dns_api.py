"""
DNS API - single entry point to a configured DNS provider

This module ties a provider's zone listing and record-set factories
together, hiding whether the backend needs zone names resolved to ids and
which record-set profiles it supports.
"""

import logging
from typing import List, Optional

from .model import Zone, name_equal_to
from .provider import Provider
from .record_sets import (
    AllProfileResourceRecordSetApi,
    AllProfileResourceRecordSetApiFactory,
    GeoResourceRecordSetApi,
    GeoResourceRecordSetApiFactory,
    ResourceRecordSetApi,
    ResourceRecordSetApiFactory,
    WeightedResourceRecordSetApi,
    WeightedResourceRecordSetApiFactory,
)
from .zones import ZoneApi
from ..exceptions import ZoneNotFoundError
from ..utils.validators import check_zone_id

logger = logging.getLogger(__name__)


class DNSApi:
    """Manipulates zones and record sets through one provider."""

    def __init__(
        self,
        provider: Provider,
        zones: ZoneApi,
        basic_factory: ResourceRecordSetApiFactory,
        all_profile_factory: AllProfileResourceRecordSetApiFactory,
        geo_factory: GeoResourceRecordSetApiFactory,
        weighted_factory: WeightedResourceRecordSetApiFactory,
    ):
        self._provider = provider
        self._zones = zones
        self._basic_factory = basic_factory
        self._all_profile_factory = all_profile_factory
        self._geo_factory = geo_factory
        self._weighted_factory = weighted_factory

    @property
    def provider(self) -> Provider:
        return self._provider

    @property
    def zones(self) -> ZoneApi:
        """Zones such as ``denominator.io.``; supported by every provider."""
        return self._zones

    def basic_record_sets_in_zone(self, id_or_name: str) -> ResourceRecordSetApi:
        """
        Controls basic record sets in a zone. Supported by every provider.

        Record sets returned carry no qualifier; geo and weighted sets are
        neither returned nor affected.

        Args:
            id_or_name: id of the zone, or its name. ``zone.id_or_name``
                always works.
        """
        return self._basic_factory.create(self._resolve(id_or_name))

    def record_sets_in_zone(self, id_or_name: str) -> AllProfileResourceRecordSetApi:
        """
        Controls every record set in a zone, whatever its profile.

        Supported by every provider, though a provider without profiles
        only ever returns basic record sets.
        """
        return self._all_profile_factory.create(self._resolve(id_or_name))

    def geo_record_sets_in_zone(self, id_or_name: str) -> Optional[GeoResourceRecordSetApi]:
        """
        Controls record sets answered by the territory of the caller,
        otherwise known as directional records.

        Returns:
            The API, or None if the provider does not support geo records.
        """
        return self._optional(self._geo_factory, id_or_name)

    def weighted_record_sets_in_zone(
        self, id_or_name: str
    ) -> Optional[WeightedResourceRecordSetApi]:
        """
        Controls record sets answered in proportion to their weight.

        Returns:
            The API, or None if the provider does not support weighted records.
        """
        return self._optional(self._weighted_factory, id_or_name)

    def id_or_name(self, zone_name: str) -> str:
        """
        Resolve a zone name to the identifier the backend expects.

        When the provider keeps zone names unique the name is the
        identifier. Otherwise the zones are listed and the first zone with
        exactly this name wins; its id is returned.

        Raises:
            ZoneNotFoundError: no zone carries the name.
        """
        if not self._provider.supports_duplicate_zone_names:
            return zone_name
        current_zones = list(self._zones)
        return self._first_named(zone_name, current_zones)

    def _optional(self, factory, id_or_name: str):
        check_zone_id(id_or_name)
        if not factory.supported:
            logger.debug(
                f"{self._provider.name} does not support {factory.capability} record sets"
            )
            return factory.create(id_or_name)
        return factory.create(self._resolve(id_or_name))

    def _resolve(self, id_or_name: str) -> str:
        """Use an existing zone id as-is, otherwise resolve it as a name."""
        check_zone_id(id_or_name)
        if not self._provider.supports_duplicate_zone_names:
            return id_or_name
        current_zones = list(self._zones)
        if any(zone.id == id_or_name for zone in current_zones):
            return id_or_name
        return self._first_named(id_or_name, current_zones)

    def _first_named(self, zone_name: str, current_zones: List[Zone]) -> str:
        matches = [zone for zone in current_zones if name_equal_to(zone_name)(zone)]
        if not matches:
            raise ZoneNotFoundError(zone_name, current_zones)
        if len(matches) > 1:
            # First in listing order wins; an unstable backend order changes the result
            logger.debug(
                f"{len(matches)} zones named {zone_name} on {self._provider.name}, "
                f"using {matches[0].id}"
            )
        zone = matches[0]
        if zone.id is None:
            logger.error(
                f"{self._provider.name} allows duplicate zone names but zone {zone_name} has no id"
            )
            raise ZoneNotFoundError(zone_name, current_zones)
        logger.debug(f"Resolved zone {zone_name} to {zone.id}")
        return zone.id
