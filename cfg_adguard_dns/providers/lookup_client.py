"""
Lookup Client - Unified interface for lookup providers

This module provides a common interface for the ways the lookup target can be
resolved, currently nslookup, dnspython and a mock provider.
"""

import logging
from typing import Dict

from .base_provider import LookupProvider
from .dnspython_provider import DNSPythonProvider
from .mock_provider import MockLookupProvider
from .nslookup_provider import NslookupProvider
from ..core.templates import LOOKUP_TARGET

logger = logging.getLogger(__name__)

PROVIDERS = {
    "nslookup": NslookupProvider,
    "dnspython": DNSPythonProvider,
    "mock": MockLookupProvider,
}


class LookupClient:
    """Unified lookup client that supports multiple providers."""

    def __init__(self, config: Dict = None):
        """Initialize lookup client with the `lookup` configuration section."""
        self.config = config or {}
        self.target = self.config.get("target", LOOKUP_TARGET)
        self.provider = self._get_provider()

    def _get_provider(self) -> LookupProvider:
        """Get lookup provider based on configuration."""
        provider_name = self.config.get("provider", "nslookup")
        provider_class = PROVIDERS.get(provider_name)

        if provider_class is None:
            logger.warning(f"Unknown provider '{provider_name}', using nslookup provider")
            return NslookupProvider(self.config)

        logger.info(f"Using {provider_name} lookup provider")
        return provider_class(self.config)

    def lookup(self, target: str = None) -> bytes:
        """Look up target, the configured lookup target by default."""
        return self.provider.lookup(target or self.target)
