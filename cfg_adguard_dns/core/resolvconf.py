"""
Resolvconf - Head file handling and resolvconf refresh

The head file is prepended by resolvconf(8) to the generated resolv.conf,
so writing nameserver lines into it and running `resolvconf -u` makes them
the first nameservers the system resolver uses.
"""

import logging
import os
from typing import Sequence, TextIO

from .templates import (
    DEFAULT_TEMPLATE,
    EXTENDED_TEMPLATE,
    RESOLVCONF_HEAD_DEFAULT_PATH,
    RESOLVCONF_HEAD_ENV_VAR,
    RESOLVCONF_UPDATE_COMMAND,
)
from ..utils.process import run_command

logger = logging.getLogger(__name__)


def get_path() -> str:
    """Return the head file path, honouring the environment override."""
    path = os.environ.get(RESOLVCONF_HEAD_ENV_VAR)
    if path is None:
        return RESOLVCONF_HEAD_DEFAULT_PATH
    return path


def write_default_template_with_adguard_dns(file: TextIO):
    """Write the disclaimer followed by the AdGuard DNS nameservers."""
    file.write(EXTENDED_TEMPLATE)
    logger.info(f"Wrote AdGuard DNS template to {getattr(file, 'name', file)}")


def write_default_template(file: TextIO):
    """Write the disclaimer only."""
    file.write(DEFAULT_TEMPLATE)
    logger.info(f"Wrote default template to {getattr(file, 'name', file)}")


def update_resolvconf(command: Sequence[str] = RESOLVCONF_UPDATE_COMMAND):
    """
    Regenerate resolv.conf from the resolvconf sources.

    Output is discarded. A non-zero exit status is only logged.

    Raises:
        CommandError: If the command could not be started
    """
    logger.info(f"Updating resolvconf with: {' '.join(command)}")
    result = run_command(command)
    if result.returncode != 0:
        logger.warning(
            f"{command[0]} exited with status {result.returncode}: "
            f"{result.stderr.decode(errors='replace').strip()}"
        )
