"""
Utility modules for godeps.

This package contains shared helpers used throughout the godeps codebase,
including the exception hierarchy and the command error handler.
"""

from godeps.utils.command_error_handler import handle_command_errors
from godeps.utils.exceptions import (
    ConfigurationError,
    GodepsError,
    MalformedResponseError,
    QueryFailedError,
    QueryTimeoutError,
    ToolUnavailableError,
)
from godeps.utils.log_setup import setup_logging

__all__ = [
    "handle_command_errors",
    "setup_logging",
    "GodepsError",
    "ToolUnavailableError",
    "QueryFailedError",
    "QueryTimeoutError",
    "MalformedResponseError",
    "ConfigurationError",
]
