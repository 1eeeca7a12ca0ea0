#!/usr/bin/env python3
"""
cfg-adguard-dns - Main Entry Point

This is the main entry point for cfg-adguard-dns.
It can be run directly or imported as a module.
"""

from cfg_adguard_dns.cli.main import main

if __name__ == "__main__":
    main()
