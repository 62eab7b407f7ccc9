"""
Core DNS facade functionality.

This package contains the provider descriptor, the zone and record-set
model, the API contracts providers implement and the DNSApi facade.
"""

from .dns_api import DNSApi
from .model import Geo, ResourceRecordSet, Weighted, Zone
from .provider import Provider
from .zones import ZoneApi

__all__ = ["DNSApi", "Geo", "Provider", "ResourceRecordSet", "Weighted", "Zone", "ZoneApi"]
