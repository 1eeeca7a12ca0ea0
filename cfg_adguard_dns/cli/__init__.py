"""
Command-line interface components.

This package contains the CLI entry point for cfg-adguard-dns.
"""

from .main import main

__all__ = ["main"]
