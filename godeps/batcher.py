"""
Batched dependency metadata collection.

The go tool accepts many import paths per invocation, but the command line
has a length ceiling. Import paths are therefore grouped into contiguous,
order preserving batches whose total length stays under ``max_chars``.
"""

import logging
from typing import Iterable, List, Sequence, Tuple

from godeps.interfaces.query import IPackageQuery
from godeps.models import (
    Dependency,
    ImportGraph,
    PackageInfo,
    PackageMetadata,
    is_sub_package,
)
from godeps.utils.exceptions import ConfigurationError, MalformedResponseError

logger = logging.getLogger(__name__)

DEFAULT_MAX_CHARS = 8000
MIN_MAX_CHARS = 200


def resolve_dependencies(graph: ImportGraph) -> List[Dependency]:
    """Flag every transitive dependency that is also a direct import."""
    direct = set(graph.imports)
    return [
        Dependency(import_path=path, directly_imported=path in direct)
        for path in graph.deps
    ]


def plan_batches(import_paths: Iterable[str], max_chars: int) -> List[List[str]]:
    """
    Split import paths into contiguous batches.

    A batch is closed before a path that would push its total length past
    ``max_chars``. A path longer than ``max_chars`` on its own still gets a
    batch of its own.
    """
    batches = []
    current = []
    count = 0

    for path in import_paths:
        if current and count + len(path) > max_chars:
            batches.append(current)
            current = []
            count = 0
        current.append(path)
        count += len(path)

    if current:
        batches.append(current)

    return batches


class QueryBatcher:
    """Collects PackageInfo for every dependency of a root package."""

    def __init__(self, query: IPackageQuery, max_chars: int = DEFAULT_MAX_CHARS):
        if not _valid_max_chars(max_chars):
            raise ConfigurationError(
                f"max_chars must be an integer >= {MIN_MAX_CHARS}, got {max_chars!r}"
            )
        self.query = query
        self.max_chars = max_chars

    def set_max_chars(self, n: int) -> bool:
        """Change the batch threshold; values below the minimum are refused."""
        if not _valid_max_chars(n):
            logger.warning(
                "Ignoring max_chars=%r (minimum is %d), keeping %d",
                n, MIN_MAX_CHARS, self.max_chars,
            )
            return False
        self.max_chars = n
        return True

    def dependencies(self, root: str) -> List[Dependency]:
        """Run the graph query for ``root`` and flag direct imports."""
        return self._resolve(root)[1]

    def _resolve(self, root: str) -> Tuple[str, List[Dependency]]:
        graph = self.query.query_graph(root)
        deps = resolve_dependencies(graph)
        logger.info(
            "%s has %d dependencies (%d direct)",
            root, len(deps), sum(1 for d in deps if d.directly_imported),
        )
        return graph.import_path or root, deps

    def collect(self, root: str) -> List[PackageInfo]:
        """
        Gather metadata for the full transitive closure of ``root``.

        Any failed query aborts the whole collection; partial results are
        never returned.
        """
        # Relative arguments such as "." are resolved to the reported import path
        root, deps = self._resolve(root)
        if not deps:
            return []

        batches = plan_batches((d.import_path for d in deps), self.max_chars)
        logger.debug("Querying metadata in %d batch(es)", len(batches))

        infos = []
        pos = 0
        for n, batch in enumerate(batches, 1):
            logger.debug(
                "Batch %d/%d: %d packages, %d characters",
                n, len(batches), len(batch), sum(len(p) for p in batch),
            )
            metadata = self.query.query_metadata(root, batch)
            if len(metadata) != len(batch):
                raise MalformedResponseError(
                    f"Metadata query returned {len(metadata)} entries for {len(batch)} packages"
                )
            infos.extend(
                _annotate(root, deps[pos:pos + len(batch)], metadata)
            )
            pos += len(batch)

        return infos


def _annotate(
    root: str,
    deps: Sequence[Dependency],
    metadata: Sequence[PackageMetadata],
) -> List[PackageInfo]:
    return [
        PackageInfo(
            name=meta.name,
            import_path=dep.import_path,
            directly_imported=dep.directly_imported,
            is_standard_library=meta.is_standard_library,
            is_sub_package=is_sub_package(dep.import_path, root),
        )
        for dep, meta in zip(deps, metadata)
    ]


def _valid_max_chars(n) -> bool:
    return isinstance(n, int) and not isinstance(n, bool) and n >= MIN_MAX_CHARS
