"""
AdGuard DNS Manager - Toggling AdGuard DNS through resolvconf

This module ties together the head file templates, the resolvconf refresh
and the lookup based status check.
"""

import logging
from typing import Dict, Optional, TextIO

from rich.console import Console

from .resolvconf import (
    update_resolvconf,
    write_default_template,
    write_default_template_with_adguard_dns,
)
from .status import classify_lookup_output
from .templates import (
    LOOKUP_FAILED_MESSAGE,
    RESOLVCONF_UPDATE_COMMAND,
    STATUS_ACTIVATED_MESSAGE,
    STATUS_DEACTIVATED_MESSAGE,
)
from ..providers.lookup_client import LookupClient

console = Console()
error_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def echo(text: str, err: bool = False):
    """Print text exactly as given, without rich markup or wrapping."""
    target = error_console if err else console
    target.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


class AdGuardDNSManager:
    """Activates, deactivates and reports the AdGuard DNS configuration."""

    def __init__(self, config: Dict = None):
        """Initialize the manager with the tool configuration."""
        self.config = config or {}
        self.reload_command = self.config.get(
            "reload_command", list(RESOLVCONF_UPDATE_COMMAND)
        )
        self.lookup_client = LookupClient(self.config.get("lookup", {}))

    def activate(self, file: TextIO):
        """Write the AdGuard DNS template and refresh resolvconf."""
        write_default_template_with_adguard_dns(file)
        self._update_resolvconf(file)

    def deactivate(self, file: TextIO):
        """Write the default template and refresh resolvconf."""
        write_default_template(file)
        self._update_resolvconf(file)

    def _update_resolvconf(self, file: TextIO):
        # resolvconf reads the head file from disk
        file.flush()
        if self.reload_command is None:
            logger.info("No reload command configured, skipping resolvconf update")
            return
        update_resolvconf(self.reload_command)

    def status(self) -> Optional[bool]:
        """
        Infer whether AdGuard DNS is in use from a live lookup.

        Returns:
            True if active, False if not, None if the lookup output could
            not be decoded

        Raises:
            CommandError: If the lookup could not be run
        """
        output = self.lookup_client.lookup()
        return classify_lookup_output(output)

    def show_status(self) -> Optional[bool]:
        """Print the status line, or an error line if it is unknown."""
        active = self.status()
        if active is None:
            logger.error("Lookup output is not valid UTF-8")
            echo(LOOKUP_FAILED_MESSAGE, err=True)
        elif active:
            echo(STATUS_ACTIVATED_MESSAGE)
        else:
            echo(STATUS_DEACTIVATED_MESSAGE)
        return active
