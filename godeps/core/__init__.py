"""
Service layer for godeps.

Configuration discovery and the list workflow used by the CLI.
"""
from godeps.core.config_manager import ConfigManager
from godeps.core.lister import ListService

__all__ = ["ConfigManager", "ListService"]
