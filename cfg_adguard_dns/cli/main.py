#!/usr/bin/env python3
"""
cfg-adguard-dns - Command Line Interface

Main entry point for the cfg-adguard-dns CLI. The first argument selects the
action; any further arguments are ignored.
"""

import logging
import os
import sys
from typing import Dict, List, Optional

import yaml

from ..core.dns_manager import AdGuardDNSManager, echo
from ..core.resolvconf import get_path
from ..core.templates import (
    HELP_MESSAGE,
    LOOKUP_COMMAND,
    LOOKUP_TARGET,
    RESOLVCONF_UPDATE_COMMAND,
    UNKNOWN_ARGUMENT_MESSAGE,
)
from ..utils.process import CommandError
from ..utils.validators import validate_config

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CFG_ADGUARD_DNS_CONFIG"
CONFIG_DEFAULT_PATH = "/etc/cfg-adguard-dns/config.yaml"


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv

    config_path = get_config_path()
    config = load_config(config_path)
    config_logger(config)
    logger.debug(f"Using configuration from {config_path}")

    try:
        # The head file is truncated before the arguments are looked at,
        # including for --help and unknown arguments.
        with open(get_path(), "w") as file:
            dispatch(argv, file, config)
    except (OSError, CommandError) as e:
        logger.error(f"Aborting: {e}")
        echo(f"Error: {e}", err=True)
        sys.exit(1)


def dispatch(argv: List[str], file, config: Dict):
    """Run the action named by the first argument."""
    if len(argv) < 2:
        echo(HELP_MESSAGE)
        return

    command = argv[1]
    if command == "--help":
        echo(HELP_MESSAGE)
    elif command in ("--activate", "activate"):
        AdGuardDNSManager(config).activate(file)
    elif command in ("--deactivate", "deactivate"):
        AdGuardDNSManager(config).deactivate(file)
    elif command in ("--status", "status"):
        AdGuardDNSManager(config).show_status()
    else:
        logger.debug(f"Unknown argument: {command}")
        echo(UNKNOWN_ARGUMENT_MESSAGE, err=True)


def get_config_path() -> str:
    """Return the config file path, honouring the environment override."""
    return os.environ.get(CONFIG_ENV_VAR, CONFIG_DEFAULT_PATH)


def load_config(config_path: str) -> Dict:
    """
    Load configuration from YAML file, merged over the defaults.

    Runs before logging is configured, so problems are reported on stderr
    directly rather than logged.
    """
    config = get_default_config()
    try:
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return config
    except (OSError, yaml.YAMLError) as e:
        echo(f"Error: could not load configuration from {config_path}: {e}", err=True)
        sys.exit(1)

    if not isinstance(loaded, dict):
        echo(f"Error: configuration in {config_path} must be a mapping", err=True)
        sys.exit(1)

    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value

    errors = validate_config(config)
    if errors:
        echo(f"Error: invalid configuration in {config_path}: {'; '.join(errors)}", err=True)
        sys.exit(1)

    return config


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "reload_command": list(RESOLVCONF_UPDATE_COMMAND),
        "lookup": {
            "provider": "nslookup",
            "command": LOOKUP_COMMAND,
            "target": LOOKUP_TARGET,
        },
        "logging": {"level": "WARNING", "file": None},
    }


def config_logger(config: Dict):
    """Configure logging. Log records go to stderr, stdout is kept for results."""
    logging_config = config.get("logging", None) or {}
    log_level = str(logging_config.get("level", "WARNING")).upper()
    log_file = logging_config.get("file")

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file))
        except OSError as e:
            echo(f"Error: could not open log file {log_file}: {e}", err=True)
            sys.exit(1)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


if __name__ == "__main__":
    main()
