"""
Status classification of lookup tool output.

The state is inferred from what the system resolver reports, not from the
head file: the output of a lookup names the nameserver that answered, and
if that is one of the AdGuard addresses the servers are considered active.
"""

from typing import Optional

from .templates import DNS_SERVER_1_ADDR, DNS_SERVER_2_ADDR


def contains_server_1_or_2_config(output: str) -> bool:
    """Check whether lookup output mentions either AdGuard DNS address."""
    return DNS_SERVER_1_ADDR in output or DNS_SERVER_2_ADDR in output


def classify_lookup_output(raw: bytes) -> Optional[bool]:
    """
    Classify raw lookup output.

    Args:
        raw: Bytes written by the lookup tool to stdout

    Returns:
        True if AdGuard DNS is active, False if not, None if the output
        is not valid UTF-8 text
    """
    try:
        output = raw.decode("utf-8")
    except UnicodeDecodeError:
        return None

    return contains_server_1_or_2_config(output)
