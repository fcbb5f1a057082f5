"""
List command implementation.

Thin wrapper around ListService that handles CLI argument parsing
and delegates business logic to the service layer.
"""
import sys
from typing import Optional

import typer

from godeps.classify import FilterOptions
from godeps.core.lister import ListService
from godeps.formatters import OutputFormat


def list_command(
    package: Optional[str] = typer.Argument(None, help="Import path to inspect (default: package in the current directory)"),
    all_: bool = typer.Option(False, "-a", "--all", help="Include all (recursively) imported packages, not only direct imports"),
    builtin: bool = typer.Option(True, "--builtin/--no-builtin", "-b/-B", help="Include Go's builtin (standard library) packages"),
    subpkg: bool = typer.Option(True, "--subpkg/--no-subpkg", "-s/-S", help="Include sub-packages of the inspected package"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Show a tab-separated table with all package information"),
    json_output: bool = typer.Option(False, "-j", "--json", help="Show the result as JSON"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML")
):
    """Show dependency information of a Go package."""

    if verbose and json_output:
        typer.echo("Option -v/--verbose and -j/--json cannot be used together", err=True)
        sys.exit(1)

    if verbose:
        output_format = OutputFormat.VERBOSE
    elif json_output:
        output_format = OutputFormat.JSON
    else:
        output_format = OutputFormat.PLAIN

    # Delegate to service layer
    list_service = ListService()
    exit_code, packages = list_service.execute_list(
        package=package,
        options=FilterOptions(all=all_, builtin=builtin, subpkg=subpkg),
        output_format=output_format,
        config_path=config_path
    )

    # Exit with appropriate code
    if exit_code != 0:
        sys.exit(exit_code)
