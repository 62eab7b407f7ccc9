"""
DNS provider implementations.

This package contains the provider interface, the provider registry
used by DNSClient, and the BIND and mock providers.
"""

from .base_provider import DNSProvider
from .bind_provider import BINDProvider
from .dns_client import PROVIDERS, DNSClient
from .mock_provider import MockDNSProvider

__all__ = ["DNSClient", "DNSProvider", "BINDProvider", "MockDNSProvider", "PROVIDERS"]
