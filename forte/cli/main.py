"""Main entry point for the Forte CLI.

Scope can be given once for every subcommand::

    forte --hostname dealer.client.us --trunk acme --branch north content get products p-1

or through FORTE_HOSTNAME, FORTE_TRUNK and FORTE_BRANCH. Without either, the
scope saved by ``forte auth login`` is used.
"""

from __future__ import annotations

try:
    import typer
except ImportError:
    import sys

    print("Forte CLI requires extras: pip install forte-api[cli]")
    sys.exit(1)

from rich.console import Console

from .commands import ScopeDefaults, auth, content, developer, organizations, resolve_scope

app = typer.Typer(
    name="forte",
    help="Forte CLI - Query organizations, content and carts on the Forte platform",
    no_args_is_help=True,
)

app.add_typer(auth.app, name="auth")
app.add_typer(content.app, name="content")
app.add_typer(developer.app, name="dev")
app.add_typer(organizations.app, name="organizations")

console = Console()


def _print_version(value: bool) -> None:
    if value:
        from forte import __version__

        typer.echo(f"forte {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    hostname: str = typer.Option(None, "--hostname", envvar="FORTE_HOSTNAME", help="Default scope hostname"),
    trunk: str = typer.Option(None, "--trunk", envvar="FORTE_TRUNK", help="Default trunk (organization) id"),
    branch: str = typer.Option(None, "--branch", envvar="FORTE_BRANCH", help="Default branch id"),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the CLI version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Keep the root scope options for subcommands."""
    _ = version
    ctx.obj = ScopeDefaults(hostname, trunk, branch)


@app.command("scope")
def show_scope(ctx: typer.Context) -> None:
    """Show the scope that commands will use."""
    console.print_json(data=resolve_scope(ctx).to_dict())


@app.command()
def version() -> None:
    """Show the CLI version."""
    from forte import __version__

    typer.echo(f"forte {__version__}")


if __name__ == "__main__":
    app()
