"""
Base lookup provider interface.

This module defines the abstract base class that all lookup providers must implement.
"""

from abc import ABC, abstractmethod


class LookupProvider(ABC):
    """Abstract base class for lookup providers."""

    @abstractmethod
    def lookup(self, target: str) -> bytes:
        """Resolve target and return the lookup report as raw bytes."""
        pass
