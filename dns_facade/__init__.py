"""
DNS Facade - one API over many DNS providers

Manage zones and record sets through a single DNSApi, whatever the
backend: providers differ in whether zone names are unique and whether
geo or weighted record sets exist, and the facade hides both.
"""

__version__ = "1.0.0"
__author__ = "DNS Facade Team"
__description__ = "Provider-agnostic facade over DNS management backends"

from .core.dns_api import DNSApi
from .core.model import Geo, ResourceRecordSet, Weighted, Zone
from .core.provider import Provider
from .exceptions import (
    DNSFacadeError,
    InvalidZoneIdError,
    ProviderError,
    UnknownProviderError,
    ZoneNotFoundError,
)
from .providers.dns_client import DNSClient

__all__ = [
    "DNSApi",
    "DNSClient",
    "DNSFacadeError",
    "Geo",
    "InvalidZoneIdError",
    "Provider",
    "ProviderError",
    "ResourceRecordSet",
    "UnknownProviderError",
    "Weighted",
    "Zone",
    "ZoneNotFoundError",
]
