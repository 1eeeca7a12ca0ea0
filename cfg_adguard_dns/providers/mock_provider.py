"""
Mock lookup provider for testing and demonstration.

This module provides a lookup provider that returns canned output instead of
querying DNS, for safe testing and demonstration purposes.
"""

import logging
from typing import Dict, List, Union

from .base_provider import LookupProvider

logger = logging.getLogger(__name__)


class MockLookupProvider(LookupProvider):
    """Mock lookup provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock provider."""
        config = config or {}
        self.output: Union[str, bytes] = config.get("output", "")
        self.targets: List[str] = []
        logger.info("Mock lookup provider initialized")

    def lookup(self, target: str) -> bytes:
        """Record the target and return the canned output."""
        self.targets.append(target)
        logger.info(f"Mock: Looked up {target}")
        if isinstance(self.output, bytes):
            return self.output
        return self.output.encode("utf-8")
