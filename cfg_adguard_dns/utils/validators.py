"""
Validators - Configuration validation

This module checks the tool configuration loaded from YAML before anything
is written, so a typo in the config file fails loudly instead of producing
a half-applied change.
"""

from typing import Dict, List

LOOKUP_PROVIDERS = ("nslookup", "dnspython", "mock")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_command(command) -> bool:
    """
    Validate an external command specification.

    Args:
        command: Program and arguments as a list of strings

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(command, list) or not command:
        return False

    return all(isinstance(part, str) and part for part in command)


def validate_config(config: Dict) -> List[str]:
    """
    Validate the tool configuration.

    Args:
        config: Configuration merged over the defaults

    Returns:
        List of problems found, empty if the configuration is valid
    """
    errors = []

    reload_command = config.get("reload_command")
    if reload_command is not None and not validate_command(reload_command):
        errors.append("reload_command must be null or a non-empty list of strings")

    lookup = config.get("lookup")
    if not isinstance(lookup, dict):
        errors.append("lookup must be a mapping")
    else:
        if lookup.get("provider") not in LOOKUP_PROVIDERS:
            errors.append(
                f"lookup.provider must be one of: {', '.join(LOOKUP_PROVIDERS)}"
            )

        target = lookup.get("target")
        if not isinstance(target, str) or not target.strip():
            errors.append("lookup.target must be a non-empty string")

        command = lookup.get("command")
        if not isinstance(command, str) or not command:
            errors.append("lookup.command must be a non-empty string")

    logging_config = config.get("logging")
    if not isinstance(logging_config, dict):
        errors.append("logging must be a mapping")
    else:
        level = logging_config.get("level")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            errors.append(f"logging.level must be one of: {', '.join(LOG_LEVELS)}")

        log_file = logging_config.get("file")
        if log_file is not None and not isinstance(log_file, str):
            errors.append("logging.file must be null or a path")

    return errors
