"""
Main CLI application for godeps.

Defines the Typer application structure and command routing,
keeping the CLI layer thin.
"""
import typer

from godeps.cli.commands.examples import examples_command
from godeps.cli.commands.listing import list_command


# Initialize Typer app
app = typer.Typer(
    help="godeps - Go package dependency information",
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Register commands
app.command("list", help="Show dependency information of a Go package.")(list_command)
app.command("examples", help="Show usage examples.")(examples_command)


# Add callback to make list the default command when no subcommand is specified
@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """godeps - Go package dependency information.

    Run 'godeps list [PACKAGE]' to see what a package depends on.
    Run 'godeps examples' for more usage examples.

    Without a subcommand the current package is listed with default options.
    Options such as -a or -j are accepted only after 'list'.

    The "go" command must be installed, and the inspected package must be
    available to it.
    """
    if ctx.invoked_subcommand is None:
        # Default to listing the package in the current directory
        ctx.invoke(list_command, package=None, all_=False, builtin=True, subpkg=True,
                   verbose=False, json_output=False, config_path=None)
