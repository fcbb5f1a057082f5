"""
CLI module for godeps.

Provides the command-line interface as a thin layer over the service layer.
"""
from godeps.cli.app import app as _app

# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    _app()

__all__ = ['app']
