"""Shared fixtures for godeps tests."""

from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from godeps.interfaces.query import IPackageQuery
from godeps.models import ImportGraph, PackageMetadata


class FakePackageQuery(IPackageQuery):
    """In-memory package query that records every metadata call."""

    def __init__(
        self,
        graphs: Optional[Dict[str, ImportGraph]] = None,
        metadata: Optional[Dict[str, Tuple[str, bool]]] = None,
        current: str = "example.com/app",
        available: bool = True,
        metadata_error: Optional[Exception] = None,
    ):
        self.graphs = graphs or {}
        self.metadata = metadata or {}
        self.current = current
        self.available = available
        self.metadata_error = metadata_error
        self.graph_calls: List[str] = []
        self.metadata_calls: List[List[str]] = []

    def is_available(self) -> bool:
        return self.available

    def query_graph(self, import_path: str) -> ImportGraph:
        self.graph_calls.append(import_path)
        return self.graphs.get(import_path, ImportGraph())

    def query_metadata(self, root: str, import_paths: Sequence[str]) -> List[PackageMetadata]:
        self.metadata_calls.append(list(import_paths))
        if self.metadata_error is not None and len(self.metadata_calls) > 1:
            raise self.metadata_error
        results = []
        for path in import_paths:
            name, standard = self.metadata.get(path, (path.rsplit("/", 1)[-1], False))
            results.append(PackageMetadata(name=name, is_standard_library=standard))
        return results

    def query_current_package(self) -> str:
        return self.current


APP_GRAPH = ImportGraph(
    imports=["fmt", "example.com/app/internal/util", "github.com/pkg/errors"],
    deps=[
        "errors",
        "example.com/app/internal/util",
        "fmt",
        "github.com/pkg/errors",
        "io",
    ],
)

APP_METADATA = {
    "errors": ("errors", True),
    "example.com/app/internal/util": ("util", False),
    "fmt": ("fmt", True),
    "github.com/pkg/errors": ("errors", False),
    "io": ("io", True),
}


@pytest.fixture
def app_query():
    """Query for a small application with stdlib, third-party and sub-packages."""
    return FakePackageQuery(
        graphs={"example.com/app": APP_GRAPH},
        metadata=APP_METADATA,
    )
