"""Developer commands for the Forte CLI: request signing and the developer log."""

from __future__ import annotations

import json

import typer
from rich.console import Console

from forte.auth.signing import sign_checksum
from forte.cli.commands import (
    BRANCH_OPTION,
    HOSTNAME_OPTION,
    TRUNK_OPTION,
    exit_on_api_error,
    get_authenticated_client,
)
from forte.exceptions import APIError, InvalidArgumentError

app = typer.Typer(help="Developer tools")
console = Console()


@app.command()
def sign(
    hostname: str = typer.Argument(help="Hostname the signature is bound to"),
    private_key: str = typer.Option(..., "--private-key", envvar="FORTE_PRIVATE_KEY", help="Private key"),
    public_key: str = typer.Option(..., "--public-key", envvar="FORTE_PUBLIC_KEY", help="Public key"),
    timestamp: int = typer.Option(None, "--timestamp", help="Unix time in seconds (default: now)"),
) -> None:
    """Print a Checksum Authorization header."""
    header, _ = sign_checksum(private_key, public_key, hostname, timestamp)
    typer.echo(header)


@app.command()
def log(
    ctx: typer.Context,
    level: str = typer.Argument(help="trace, debug, info, warn, error or fatal"),
    message: str = typer.Argument(help="Log message"),
    meta: str = typer.Option(None, "--meta", help="JSON object with extra context"),
    hostname: str = HOSTNAME_OPTION,
    trunk: str = TRUNK_OPTION,
    branch: str = BRANCH_OPTION,
) -> None:
    """Send an entry to the developer log."""
    meta_data = None
    if meta:
        try:
            meta_data = json.loads(meta)
        except json.JSONDecodeError as e:
            raise typer.BadParameter(f"Not valid JSON: {e}", param_hint="--meta")

    client = get_authenticated_client(ctx, hostname, trunk, branch)

    try:
        client.log(level, message, meta_data)
        console.print("[green]Logged.[/green]")
    except InvalidArgumentError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except APIError as e:
        exit_on_api_error(console, e)
    finally:
        client.close()
