from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Dependency:
    """A package found in the transitive closure of the root package."""
    import_path: str
    directly_imported: bool = False


@dataclass(frozen=True)
class ImportGraph:
    """Direct imports and all transitive dependencies of a package."""
    imports: List[str] = field(default_factory=list)
    deps: List[str] = field(default_factory=list)
    import_path: str = ""


@dataclass(frozen=True)
class PackageMetadata:
    """One ``name:standard`` line reported for an import path."""
    name: str
    is_standard_library: bool


@dataclass(frozen=True)
class PackageInfo:
    """Dependency annotated with its metadata."""
    name: str
    import_path: str
    directly_imported: bool
    is_standard_library: bool
    is_sub_package: bool

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the field names of the ``go list`` tooling."""
        return {
            "Name": self.name,
            "ImportPath": self.import_path,
            "Directly": self.directly_imported,
            "Builtin": self.is_standard_library,
            "SubPkg": self.is_sub_package,
        }


def is_sub_package(import_path: str, root: str) -> bool:
    """Return True if ``import_path`` is a strict path-segment descendant of ``root``."""
    return import_path.startswith(root.rstrip("/") + "/")
