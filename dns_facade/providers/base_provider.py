"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
"""

from abc import ABC, abstractmethod

from ..core.dns_api import DNSApi
from ..core.provider import Provider
from ..core.record_sets import (
    AllProfileResourceRecordSetApiFactory,
    GeoResourceRecordSetApiFactory,
    ResourceRecordSetApiFactory,
    WeightedResourceRecordSetApiFactory,
)
from ..core.zones import ZoneApi


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    #: Static capabilities, for providers whose descriptor does not depend on config.
    descriptor: Provider = None

    @classmethod
    def describe(cls, config=None) -> Provider:
        """Capabilities of this backend without connecting to it."""
        if cls.descriptor is None:
            return cls(config or {}).provider
        return cls.descriptor

    @property
    @abstractmethod
    def provider(self) -> Provider:
        """Capabilities of this backend."""
        pass

    @abstractmethod
    def zones(self) -> ZoneApi:
        """Zone listing for this backend."""
        pass

    @abstractmethod
    def basic_record_set_api_factory(self) -> ResourceRecordSetApiFactory:
        pass

    @abstractmethod
    def all_profile_record_set_api_factory(self) -> AllProfileResourceRecordSetApiFactory:
        pass

    @abstractmethod
    def geo_record_set_api_factory(self) -> GeoResourceRecordSetApiFactory:
        pass

    @abstractmethod
    def weighted_record_set_api_factory(self) -> WeightedResourceRecordSetApiFactory:
        pass

    def dns_api(self) -> DNSApi:
        """Wire this provider's zone listing and factories into a DNSApi."""
        return DNSApi(
            self.provider,
            self.zones(),
            self.basic_record_set_api_factory(),
            self.all_profile_record_set_api_factory(),
            self.geo_record_set_api_factory(),
            self.weighted_record_set_api_factory(),
        )
