"""Inclusion filters for collected package information.

A package is kept when it passes all three switches: ``all`` admits
transitive dependencies, ``builtin`` admits standard-library packages and
``subpkg`` admits sub-packages of the root.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from godeps.batcher import DEFAULT_MAX_CHARS, QueryBatcher
from godeps.interfaces.query import IPackageQuery
from godeps.models import PackageInfo
from godeps.query import GoListQuery


@dataclass(frozen=True)
class FilterOptions:
    """Inclusion switches; defaults match the command line defaults."""
    all: bool = False
    builtin: bool = True
    subpkg: bool = True

    def accepts(self, info: PackageInfo) -> bool:
        return (
            (self.all or info.directly_imported)
            and (self.builtin or not info.is_standard_library)
            and (self.subpkg or not info.is_sub_package)
        )

    def apply(self, packages: Iterable[PackageInfo]) -> List[PackageInfo]:
        return [info for info in packages if self.accepts(info)]


def filter_packages(
    packages: Iterable[PackageInfo],
    all: bool = False,
    builtin: bool = True,
    subpkg: bool = True,
) -> List[PackageInfo]:
    return FilterOptions(all=all, builtin=builtin, subpkg=subpkg).apply(packages)


def list_packages(
    import_path: str,
    all: bool = False,
    builtin: bool = True,
    subpkg: bool = True,
    query: Optional[IPackageQuery] = None,
    max_chars: int = DEFAULT_MAX_CHARS,
) -> List[PackageInfo]:
    """Collect dependency information for ``import_path`` and filter it."""
    if query is None:
        query = GoListQuery()

    packages = QueryBatcher(query, max_chars=max_chars).collect(import_path)
    return filter_packages(packages, all=all, builtin=builtin, subpkg=subpkg)
