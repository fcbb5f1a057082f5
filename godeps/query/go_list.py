"""
``go list`` implementation of the package query interface.

Each query runs one ``go list`` command, captures its output and checks the
error stream and exit status before parsing anything.
"""

import json
import logging
import shutil
import subprocess
from typing import List, Optional, Sequence

from godeps.interfaces.query import IPackageQuery
from godeps.models import ImportGraph, PackageMetadata
from godeps.utils.command_error_handler import handle_command_errors
from godeps.utils.exceptions import MalformedResponseError, QueryFailedError

# Output template for metadata queries: one "name:standard" line per package
METADATA_TEMPLATE = "{{.Name}}:{{.Standard}}"

# Spellings accepted by Go's strconv.ParseBool
_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(value: str) -> bool:
    """Parse a boolean the way the go tool prints and accepts them."""
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean: {value!r}")


def parse_graph(output: str) -> ImportGraph:
    """Parse the JSON document printed by ``go list -json``."""
    try:
        data = json.loads(output)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(
            "Failed to decode go list JSON output",
            output=output,
            original_exception=e,
        )

    if not isinstance(data, dict):
        raise MalformedResponseError("Unexpected go list JSON output", output=output)

    # Packages without imports omit the keys entirely
    imports = data.get("Imports") or []
    deps = data.get("Deps") or []
    if not isinstance(imports, list) or not isinstance(deps, list):
        raise MalformedResponseError("Imports and Deps must be lists", output=output)

    import_path = data.get("ImportPath") or ""
    if not isinstance(import_path, str):
        raise MalformedResponseError("ImportPath must be a string", output=output)

    return ImportGraph(imports=list(imports), deps=list(deps), import_path=import_path)


def parse_metadata(output: str, expected: int) -> List[PackageMetadata]:
    """
    Parse ``name:standard`` lines.

    Args:
        output: Standard output of the metadata query
        expected: Number of import paths that were queried

    Returns:
        Exactly ``expected`` entries; trailing extra lines are ignored

    Raises:
        MalformedResponseError: on a bad line or too few lines
    """
    lines = output.split("\n")
    if len(lines) < expected:
        raise MalformedResponseError(
            f"Expected {expected} metadata lines, got {len(lines)}",
            output=output,
        )

    results = []
    for line in lines[:expected]:
        name, sep, standard = line.partition(":")
        if not sep:
            raise MalformedResponseError(
                f"Metadata line is not in name:standard format: {line!r}",
                output=output,
            )
        try:
            is_standard = parse_bool(standard.strip())
        except ValueError as e:
            raise MalformedResponseError(
                f"Metadata line has a non-boolean standard field: {line!r}",
                output=output,
                original_exception=e,
            )
        results.append(PackageMetadata(name=name, is_standard_library=is_standard))

    return results


class GoListQuery(IPackageQuery):
    """Package queries backed by the ``go list`` command."""

    def __init__(
        self,
        go_binary: str = "go",
        timeout: Optional[float] = None,
        working_directory: Optional[str] = None,
    ):
        self.go_binary = go_binary
        self.timeout = timeout
        self.working_directory = working_directory
        self.logger = logging.getLogger(self.__class__.__name__)
        self.stats = {"commands": 0, "errors": 0}

    def is_available(self) -> bool:
        return shutil.which(self.go_binary) is not None

    def query_graph(self, import_path: str) -> ImportGraph:
        command = [self.go_binary, "list", "-json", import_path]
        output = self._run(command)
        try:
            return parse_graph(output)
        except MalformedResponseError as e:
            e.command = command
            raise

    def query_metadata(self, root: str, import_paths: Sequence[str]) -> List[PackageMetadata]:
        if not import_paths:
            return []
        command = [self.go_binary, "list", "-f", METADATA_TEMPLATE, *import_paths]
        output = self._run(command)
        try:
            return parse_metadata(output, len(import_paths))
        except MalformedResponseError as e:
            e.command = command
            raise

    def query_current_package(self) -> str:
        command = [self.go_binary, "list"]
        import_path = self._run(command).strip()
        if not import_path:
            raise MalformedResponseError(
                "go list printed no package for the current directory",
                command=command,
            )
        return import_path

    @handle_command_errors(tool="go")
    def _run(self, command: Sequence[str]) -> str:
        """Run a command and return its stdout, failing on any stderr output."""
        self.stats["commands"] += 1
        self.logger.debug("Running: %s", " ".join(command))

        result = subprocess.run(
            list(command),
            cwd=self.working_directory,
            capture_output=True,
            text=True,
            timeout=self.timeout,
        )

        if result.stderr:
            raise QueryFailedError(
                "go list reported an error",
                command=command,
                stderr=result.stderr,
                exit_code=result.returncode,
            )
        if result.returncode != 0:
            raise QueryFailedError(
                "go list failed",
                command=command,
                exit_code=result.returncode,
            )

        return result.stdout
