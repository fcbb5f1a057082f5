"""
godeps: Go package dependency information.

Calls the ``go list`` command to gather information about the packages a Go
package depends on, and filters it by direct/transitive, builtin and
sub-package status.
"""

from godeps.batcher import QueryBatcher, plan_batches, resolve_dependencies
from godeps.classify import FilterOptions, filter_packages, list_packages
from godeps.models import Dependency, ImportGraph, PackageInfo, PackageMetadata
from godeps.query import GoListQuery

__version__ = "0.1.0"

__all__ = [
    "Dependency",
    "FilterOptions",
    "GoListQuery",
    "ImportGraph",
    "PackageInfo",
    "PackageMetadata",
    "QueryBatcher",
    "filter_packages",
    "list_packages",
    "plan_batches",
    "resolve_dependencies",
]
