import os
import sys

from rich.console import Console

def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stderr.isatty()
    )

def get_console() -> Console:
    """Create the stderr console used for status and error messages."""
    if is_ci_environment():
        # CI/automated environment - no colors, no interactive elements
        return Console(stderr=True, force_terminal=False, no_color=True)
    return Console(stderr=True)
