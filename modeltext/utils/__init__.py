"""modeltext utilities package."""

from .constants import (
    DEFAULT_CACHE_ENTRIES,
    ERROR_LOG_FILE,
    PRELUDE_NAMESPACE,
    REFERENCES_TRAIT,
    STATE_DIR,
)
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .helpers import load_json_file, save_json_file
from .logging import logger

__all__ = [
    "STATE_DIR",
    "ERROR_LOG_FILE",
    "PRELUDE_NAMESPACE",
    "REFERENCES_TRAIT",
    "DEFAULT_CACHE_ENTRIES",
    "handle_exceptions",
    "ExitCodes",
    "load_json_file",
    "save_json_file",
    "logger",
]
