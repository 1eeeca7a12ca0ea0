"""
Behave environment configuration for cfg-adguard-dns CLI tests.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_scenario(context, scenario):
    """Give each scenario its own head file and config path."""
    context.temp_dir = Path(tempfile.mkdtemp(prefix="cfg-adguard-dns-"))
    context.head_path = context.temp_dir / "head"
    context.config_path = context.temp_dir / "config.yaml"

    context.env_patcher = patch.dict(
        os.environ,
        {
            "RESOLVCONF_HEAD_PATH": str(context.head_path),
            "CFG_ADGUARD_DNS_CONFIG": str(context.config_path),
        },
    )
    context.env_patcher.start()

    context.commands = []
    context.lookup_output = b""
    context.missing_commands = set()

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Restore the environment and remove scenario files."""
    context.env_patcher.stop()
    try:
        shutil.rmtree(context.temp_dir)
    except OSError as e:
        logger.warning(f"Failed to cleanup {context.temp_dir}: {e}")

    logger.info(f"Completed scenario: {scenario.name}")
