"""Error handling for modeltext commands.

Bad model input is a user problem and gets a short message. Anything else,
including a broken occurrence invariant, is a defect: it is logged with its
traceback and appended to the error log before the command exits.
"""

import traceback
from collections.abc import Callable
from datetime import datetime
from functools import wraps
from typing import Any

import click

from modeltext.model.exceptions import ModelLoadError
from modeltext.text.exceptions import OccurrenceValidationError
from modeltext.utils.logging import logger

from .constants import ERROR_LOG_FILE, STATE_DIR


def _format_details(details: dict) -> str:
    return "\n".join(f"  {key}: {value}" for key, value in details.items())


def _write_error_log(command: str, error: Exception, extra: dict | None = None) -> None:
    STATE_DIR.mkdir(parents=True, exist_ok=True)

    with open(ERROR_LOG_FILE, "a", encoding="utf-8") as f:
        f.write("\n" + "=" * 80 + "\n")
        f.write(f"[{datetime.now().isoformat()}] {command} failed\n")
        f.write(f"{type(error).__name__}: {error}\n")
        if extra:
            f.write(_format_details(extra) + "\n")
        f.write("\n")
        f.write(traceback.format_exc())


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn command failures into ClickExceptions.

    ModelLoadError is reported with its details only. Other exceptions are
    logged with a traceback to the error log and reported with its path.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except ModelLoadError as e:
            logger.error(f"Could not load model for '{func.__name__}': {e}")
            message = f"Invalid model: {e}"
            if e.details:
                message += "\n" + _format_details(e.details)
            raise click.ClickException(message) from e
        except Exception as e:
            extra = None
            if isinstance(e, OccurrenceValidationError):
                extra = {"reason": e.reason.value, **e.details}

            logger.opt(exception=True).error(f"Command '{func.__name__}' failed: {e}")
            _write_error_log(func.__name__, e, extra)

            raise click.ClickException(
                f"{type(e).__name__}: {e}\n\nFull traceback logged to: {ERROR_LOG_FILE}"
            ) from e

    return wrapper
