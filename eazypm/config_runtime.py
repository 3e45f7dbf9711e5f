"""Runtime configuration for eazypm - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from eazypm.utils.constants import (
    BACKUP_PREFIX,
    CONFIG_DIR,
    CONFIG_FILE,
    INSTALL_COMMAND_FILE,
    SCANNER_BOOTSTRAP_MANAGER,
    SCANNER_PREFIX,
)
from eazypm.utils.logging import logger

DEFAULTS = {
    "paths": {
        "command_file": INSTALL_COMMAND_FILE,
        "backup_prefix": BACKUP_PREFIX,
    },
    "scanner": {
        "prefix": SCANNER_PREFIX,
        "bootstrap_manager": SCANNER_BOOTSTRAP_MANAGER,
    },
    "timeouts": {
        "version_check": 30,
    },
}


def load_runtime_config(root: str | Path = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .eazypm/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (EAZYPM_<SECTION>_<KEY>)
    2. <root>/.eazypm/config.json
    3. Built-in defaults

    Unknown keys and values whose type differs from the default are ignored.

    Args:
        root: Project root to look for the config file in

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / CONFIG_DIR / CONFIG_FILE
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key in cfg[section] and isinstance(value, type(cfg[section][key])):
                                cfg[section][key] = value
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config file from {path}: {e}")
        logger.warning("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"EAZYPM_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                value = os.environ[env_var]
                try:
                    if isinstance(cfg[section][key], int):
                        cfg[section][key] = int(value)
                    else:
                        cfg[section][key] = value
                except ValueError as e:
                    logger.warning(f"Invalid value for environment variable {env_var}: '{value}' - {e}")
                    logger.warning(f"Using default value: {cfg[section][key]}")

    return cfg
