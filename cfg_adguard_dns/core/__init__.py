"""
Core AdGuard DNS toggling functionality.

This package contains the head file templates, the resolvconf refresh and
the status classification.
"""

from .resolvconf import get_path, update_resolvconf
from .status import classify_lookup_output, contains_server_1_or_2_config

__all__ = [
    "get_path",
    "update_resolvconf",
    "classify_lookup_output",
    "contains_server_1_or_2_config",
]
