"""
nslookup lookup provider.

Runs the nslookup(1) diagnostic tool and hands back whatever it printed.
"""

import logging
from typing import Dict

from .base_provider import LookupProvider
from ..core.templates import LOOKUP_COMMAND
from ..utils.process import run_command

logger = logging.getLogger(__name__)


class NslookupProvider(LookupProvider):
    """Lookup provider backed by the nslookup command."""

    def __init__(self, config: Dict = None):
        """Initialize nslookup provider."""
        config = config or {}
        self.command = config.get("command", LOOKUP_COMMAND)
        logger.debug(f"nslookup provider initialized with command {self.command}")

    def lookup(self, target: str) -> bytes:
        """Run the lookup command against target and return its stdout."""
        result = run_command([self.command, target])
        if result.returncode != 0:
            logger.debug(f"{self.command} exited with status {result.returncode}")
        return result.stdout
