"""
Output formatting for package information.

Three renderings are supported: bare import paths, a tab-separated table
suitable for ``column -t``, and a JSON array.
"""

import json
from enum import Enum
from typing import Sequence

from godeps.models import PackageInfo

VERBOSE_HEADER = "Name\tDirectly\tBuiltin\tSubPkg\tImportPath"


class OutputFormat(str, Enum):
    PLAIN = "plain"
    VERBOSE = "verbose"
    JSON = "json"


def _bool(value: bool) -> str:
    return "true" if value else "false"


def format_plain(packages: Sequence[PackageInfo]) -> str:
    return "\n".join(info.import_path for info in packages)


def format_verbose(packages: Sequence[PackageInfo]) -> str:
    lines = [VERBOSE_HEADER]
    for info in packages:
        lines.append("\t".join([
            info.name,
            _bool(info.directly_imported),
            _bool(info.is_standard_library),
            _bool(info.is_sub_package),
            info.import_path,
        ]))
    return "\n".join(lines)


def format_json(packages: Sequence[PackageInfo]) -> str:
    return json.dumps([info.to_dict() for info in packages], indent=1)


FORMATTERS = {
    OutputFormat.PLAIN: format_plain,
    OutputFormat.VERBOSE: format_verbose,
    OutputFormat.JSON: format_json,
}


def render(packages: Sequence[PackageInfo], output_format: OutputFormat = OutputFormat.PLAIN) -> str:
    """Render packages in the requested format."""
    return FORMATTERS[OutputFormat(output_format)](packages)
