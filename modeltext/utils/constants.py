"""Centralized constants for modeltext.

Single source of truth for paths, reserved identifiers and environment
variable names used across the package.
"""

from pathlib import Path

# ============================================================================
# OUTPUT DIRECTORIES
# ============================================================================

# Working directory for config and logs
STATE_DIR = Path("./.modeltext")

ERROR_LOG_FILE = STATE_DIR / "error.log"
CONFIG_FILE_NAME = "config.json"

# ============================================================================
# MODEL CONSTANTS
# ============================================================================

# Built-in namespace whose shapes are never scanned
PRELUDE_NAMESPACE = "smithy.api"

# Trait that only points at other shapes already covered by the walk
REFERENCES_TRAIT = "smithy.api#references"

# Default capacity of the per-model scan cache
DEFAULT_CACHE_ENTRIES = 64

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

ENV_PREFIX = "MODELTEXT_"
