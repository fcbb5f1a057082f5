"""
Examples command implementation.
"""
import typer

EXAMPLES = """Examples:

1) See what the builtin package "log" directly depends on:

    godeps list log

2) See what "log" and all its dependent packages depend on:

    godeps list -a log

3) See what "net/http" directly depends on, without sub-packages:

    godeps list -S net/http

   "net/http/internal" will not show in the result.

4) See what "github.com/m3ng9i/feedreader" directly depends on, without
   Go's builtin packages:

    godeps list -B github.com/m3ng9i/feedreader

5) See all the dependency information of "github.com/m3ng9i/go-utils/cmd"
   in table format:

    godeps list -v -a github.com/m3ng9i/go-utils/cmd | column -t

6) See what "bufio" directly depends on as JSON:

    godeps list -j bufio

Options belong to the list subcommand. Running plain "godeps" lists the
package in the current directory with the default options; to change them,
spell out the subcommand, as in "godeps list -a".
"""


def examples_command():
    """Show usage examples."""
    typer.echo(EXAMPLES, nl=False)
