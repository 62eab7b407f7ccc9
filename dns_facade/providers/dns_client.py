"""
DNS Client - configuration-driven access to a DNS provider

This module picks the provider named in the configuration, builds it from
its own configuration section and exposes the DNSApi facade over it.
"""

import logging
from typing import Dict

from .base_provider import DNSProvider
from .bind_provider import BINDProvider
from .mock_provider import MockDNSProvider
from ..core.dns_api import DNSApi
from ..exceptions import UnknownProviderError

logger = logging.getLogger(__name__)

PROVIDERS = {
    "bind": BINDProvider,
    "mock": MockDNSProvider,
}


class DNSClient:
    """Unified DNS client over the configured provider."""

    def __init__(self, config: Dict):
        """Initialize DNS client with configuration."""
        self.config = config
        self.provider = self._get_provider()
        self.api = self.provider.dns_api()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "mock")
        provider_config = self.config.get("dns_providers", {}).get(provider_name) or {}

        provider_class = PROVIDERS.get(provider_name)
        if provider_class is None:
            raise UnknownProviderError(provider_name, list(PROVIDERS))
        logger.info(f"Using DNS provider '{provider_name}'")
        return provider_class(provider_config)
