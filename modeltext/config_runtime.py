"""Runtime configuration for modeltext - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from modeltext.utils.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_CACHE_ENTRIES,
    ENV_PREFIX,
    PRELUDE_NAMESPACE,
    REFERENCES_TRAIT,
    STATE_DIR,
)
from modeltext.utils.logging import logger

DEFAULTS = {
    "cache": {
        "max_entries": DEFAULT_CACHE_ENTRIES,
    },
    "scan": {
        "prelude_namespace": PRELUDE_NAMESPACE,
        "skip_traits": [REFERENCES_TRAIT],
    },
    "report": {
        "max_rows": 200,
    },
}


def load_runtime_config(root: str | Path = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .modeltext/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (MODELTEXT_<SECTION>_<KEY>)
    2. .modeltext/config.json file
    3. Built-in defaults

    Args:
        root: Root directory to look for config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / STATE_DIR.name / CONFIG_FILE_NAME
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
        logger.info("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"{ENV_PREFIX}{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                value = os.environ[env_var]
                try:
                    default_value = cfg[section][key]
                    if isinstance(default_value, int):
                        cfg[section][key] = int(value)
                    elif isinstance(default_value, list):
                        cfg[section][key] = [v.strip() for v in value.split(",") if v.strip()]
                    else:
                        cfg[section][key] = value
                except (ValueError, AttributeError) as e:
                    logger.warning(
                        f"Invalid value for environment variable {env_var}: '{value}' - {e}"
                    )
                    logger.info(f"Using default value: {cfg[section][key]}")

    if cfg["cache"]["max_entries"] < 1:
        logger.warning(
            f"cache.max_entries must be positive, got {cfg['cache']['max_entries']}; "
            f"using {DEFAULT_CACHE_ENTRIES}"
        )
        cfg["cache"]["max_entries"] = DEFAULT_CACHE_ENTRIES

    return cfg
