"""
Utility functions and helpers.

This package contains helpers for running external commands and
validating configuration.
"""

from .process import CommandError, run_command
from .validators import validate_config

__all__ = ["CommandError", "run_command", "validate_config"]
