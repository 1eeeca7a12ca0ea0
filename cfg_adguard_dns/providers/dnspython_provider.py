"""
dnspython lookup provider.

This module resolves the lookup target in-process using the dnspython library
and the system resolver configuration, for hosts without nslookup installed.
The report mimics nslookup output so the same status classification applies.
"""

import logging
from typing import Dict

import dns.exception
import dns.resolver

from .base_provider import LookupProvider
from ..utils.process import CommandError

logger = logging.getLogger(__name__)


class DNSPythonProvider(LookupProvider):
    """Lookup provider using dnspython and /etc/resolv.conf."""

    def __init__(self, config: Dict = None):
        """Initialize dnspython provider."""
        self.config = config or {}
        self.resolv_conf = self.config.get("resolv_conf", "/etc/resolv.conf")
        logger.debug(f"dnspython provider initialized from {self.resolv_conf}")

    def _initialize_dns_resolver(self) -> dns.resolver.Resolver:
        """Create a resolver configured from the system resolv.conf."""
        return dns.resolver.Resolver(filename=self.resolv_conf)

    def lookup(self, target: str) -> bytes:
        """Resolve A records for target and render an nslookup-style report."""
        try:
            resolver = self._initialize_dns_resolver()
            answer = resolver.resolve(target, "A")
        except dns.exception.DNSException as e:
            raise CommandError(
                ["dnspython", target], f"could not lookup {target}: {e}"
            ) from e

        lines = [
            f"Server:\t\t{answer.nameserver}",
            f"Address:\t{answer.nameserver}#{answer.port}",
            "",
            "Non-authoritative answer:",
        ]
        for rdata in answer:
            lines.append(f"Name:\t{target}")
            lines.append(f"Address: {rdata.address}")
        lines.append("")

        return "\n".join(lines).encode("utf-8")
