"""
Lookup provider implementations.

This package contains the ways the lookup target can be resolved for the
status check: nslookup, dnspython, and a mock provider.
"""

from .base_provider import LookupProvider
from .dnspython_provider import DNSPythonProvider
from .lookup_client import LookupClient
from .mock_provider import MockLookupProvider
from .nslookup_provider import NslookupProvider

__all__ = [
    "LookupProvider",
    "LookupClient",
    "DNSPythonProvider",
    "MockLookupProvider",
    "NslookupProvider",
]
