"""
Reusable decorator for handling external command failures.

Translates the exceptions ``subprocess`` raises while starting or waiting
for a command into the godeps error taxonomy, so every query method gets
the same logging and error accounting from a single line.
"""

import functools
import logging
import subprocess
from typing import Callable, Optional, Sequence

from .exceptions import (
    GodepsError,
    MalformedResponseError,
    QueryFailedError,
    QueryTimeoutError,
    ToolUnavailableError,
)


def handle_command_errors(tool: str, log_stats: bool = True):
    """
    Decorator that maps command execution failures to godeps exceptions.

    The wrapped method must receive the command line (a list of strings) as
    its first positional argument after ``self``. Errors are never
    suppressed: the translated exception is always re-raised.

    Usage:
        @handle_command_errors(tool="go")
        def _run(self, command):
            return subprocess.run(command, capture_output=True, text=True)

    Args:
        tool: Name of the external tool (e.g., "go")
        log_stats: Whether to increment self.stats["errors"] on failure

    Returns:
        Decorated function
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self, command: Sequence[str], *args, **kwargs):
            logger = getattr(self, "logger", logging.getLogger(func.__name__))
            stats = getattr(self, "stats", None) if log_stats else None

            try:
                return func(self, command, *args, **kwargs)

            except GodepsError as e:
                _handle_error(e, logger, "warning", stats)

            except subprocess.TimeoutExpired as e:
                error = QueryTimeoutError(
                    message=f"Timeout while running {tool}",
                    command=command,
                    timeout_duration=e.timeout,
                    original_exception=e,
                )
                _handle_error(error, logger, "warning", stats)

            except UnicodeDecodeError as e:
                error = MalformedResponseError(
                    message=f"{tool} output is not valid UTF-8",
                    command=command,
                    original_exception=e,
                )
                _handle_error(error, logger, "warning", stats)

            except FileNotFoundError as e:
                error = ToolUnavailableError(
                    message=f'Command "{tool}" not found',
                    command=command,
                    original_exception=e,
                )
                _handle_error(error, logger, "error", stats)

            except PermissionError as e:
                error = ToolUnavailableError(
                    message=f'Command "{tool}" is not executable',
                    command=command,
                    original_exception=e,
                )
                _handle_error(error, logger, "error", stats)

            except OSError as e:
                error = QueryFailedError(
                    message=f"Failed to run {tool}",
                    command=command,
                    original_exception=e,
                )
                _handle_error(error, logger, "error", stats)

        return wrapper

    return decorator


def _handle_error(
    error: GodepsError,
    logger: logging.Logger,
    log_level: str,
    stats: Optional[dict],
):
    """Log the error, update stats and raise it."""
    if log_level == "warning":
        logger.warning(str(error))
    else:
        logger.error(str(error))

    if stats is not None and "errors" in stats:
        stats["errors"] += 1

    raise error


__all__ = ["handle_command_errors"]
