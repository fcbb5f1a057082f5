"""
Package query implementations.

Provides the ``go list`` backed implementation of IPackageQuery.
"""

from .go_list import GoListQuery

__all__ = ["GoListQuery"]
