"""
Package query interface for godeps.

Defines the narrow interface the batcher depends on, so the batching and
classification logic can be exercised against an in-memory fake instead of
a real ``go`` installation.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence

from godeps.models import ImportGraph, PackageMetadata


class IPackageQuery(ABC):
    """Abstract interface for package query implementations."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the external tool can be invoked."""
        pass

    @abstractmethod
    def query_graph(self, import_path: str) -> ImportGraph:
        """
        Get the import graph of a package.

        Returns:
            ImportGraph: direct imports and all transitive dependencies
        """
        pass

    @abstractmethod
    def query_metadata(self, root: str, import_paths: Sequence[str]) -> List[PackageMetadata]:
        """
        Get name and standard-library flag for each import path.

        Returns:
            List[PackageMetadata]: one entry per input path, in input order
        """
        pass

    @abstractmethod
    def query_current_package(self) -> str:
        """
        Resolve the import path of the package in the working directory.

        Returns:
            str: import path
        """
        pass
