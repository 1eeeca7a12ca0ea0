"""
cfg-adguard-dns - Toggle AdGuard DNS through resolvconf

Writes the resolvconf head file with or without the AdGuard public DNS
nameservers, refreshes resolvconf, and reports whether the system resolver
is currently answering through AdGuard DNS.
"""

__version__ = "1.0.0"
__author__ = "cfg-adguard-dns contributors"
__description__ = "Toggle AdGuard DNS on resolvconf based hosts"

from .core.dns_manager import AdGuardDNSManager
from .providers.lookup_client import LookupClient
from .utils.process import CommandError

__all__ = [
    "AdGuardDNSManager",
    "LookupClient",
    "CommandError",
]
