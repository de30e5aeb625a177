"""Authentication commands for the Forte CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from forte.auth.credentials import SessionCredentials
from forte.auth.storage import StoredLogin, clear_login, get_config_path, load_login, save_login
from forte.cli.commands import BRANCH_OPTION, HOSTNAME_OPTION, TRUNK_OPTION, exit_on_api_error, resolve_scope
from forte.exceptions import APIError

app = typer.Typer(help="Manage authentication")
console = Console()


def _mask(token: str) -> str:
    return f"{token[:7]}...{token[-4:]}" if len(token) > 11 else "***"


@app.command()
def login(
    ctx: typer.Context,
    hostname: str = HOSTNAME_OPTION,
    trunk: str = TRUNK_OPTION,
    branch: str = BRANCH_OPTION,
    email: str = typer.Option(None, "--email", "-e", envvar="FORTE_EMAIL", help="Account email"),
    password: str = typer.Option(None, "--password", envvar="FORTE_PASSWORD", help="Account password"),
) -> None:
    """Log in with email and password and store the issued token with its scope."""
    from forte.client import ForteClient

    scope = resolve_scope(ctx, hostname, trunk, branch)
    if not email:
        email = typer.prompt("Email")
    if not password:
        password = typer.prompt("Password", hide_input=True)

    tokens: list[str] = []
    client = ForteClient(SessionCredentials(email, password), scope)
    client.on("auth", lambda error, token: tokens.append(token) if token else None)

    try:
        client.authenticate()
    except APIError as e:
        exit_on_api_error(console, e)
    finally:
        client.close()

    if not tokens:
        console.print("[red]Authentication failed: the server did not return a token.[/red]")
        raise typer.Exit(1)

    save_login(StoredLogin(tokens[-1], scope, email))
    console.print("\n[green]Successfully authenticated![/green]")
    console.print(f"Token for {scope.hostname} ({scope.trunk}) saved to {get_config_path()}")


@app.command()
def logout() -> None:
    """Remove the stored token and scope."""
    if clear_login():
        console.print("[green]Successfully logged out.[/green]")
    else:
        console.print("[yellow]No credentials found.[/yellow]")


@app.command()
def status() -> None:
    """Show the stored token and the scope it was issued for."""
    login = load_login()

    if login is None:
        console.print("[yellow]Not authenticated.[/yellow]")
        console.print("Run [bold]forte auth login[/bold] to authenticate.")
        raise typer.Exit(1)

    console.print("[green]Authenticated[/green]")
    console.print(f"  Token: {_mask(login.bearer_token)}")
    if login.email:
        console.print(f"  Email: {login.email}")
    if login.scope is not None:
        for key, value in login.scope.to_dict().items():
            console.print(f"  {key.capitalize()}: {value}")
    console.print(f"  Config: {get_config_path()}")
