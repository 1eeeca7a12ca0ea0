"""
Process helpers - Running external commands

This module wraps subprocess invocation so that a command which cannot be
spawned at all is reported as a CommandError, while the exit status of a
command that did run is left for the caller to interpret.
"""

import logging
import subprocess
from typing import Sequence

logger = logging.getLogger(__name__)


class CommandError(RuntimeError):
    """An external command could not be run."""

    def __init__(self, command: Sequence[str], message: str):
        self.command = list(command)
        super().__init__(message)


def run_command(command: Sequence[str]) -> subprocess.CompletedProcess:
    """
    Run a command to completion and capture its output.

    Args:
        command: Program and arguments

    Returns:
        The completed process, stdout and stderr as bytes

    Raises:
        CommandError: If the program could not be started
    """
    logger.debug(f"Running command: {' '.join(command)}")
    try:
        result = subprocess.run(list(command), capture_output=True)
    except OSError as e:
        raise CommandError(command, f"failed to execute {command[0]}: {e}") from e

    logger.debug(f"{command[0]} exited with status {result.returncode}")
    return result
