"""CLI command modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import typer
from rich.console import Console

from forte.exceptions import APIError, InvalidCredentialsError, InvalidScopeError
from forte.scope import Scope

_console = Console()

# Per-command scope options. They override the root ``forte --hostname ...``
# options, which in turn override the scope saved by ``forte auth login``.
HOSTNAME_OPTION = typer.Option(None, "--hostname", help="Hostname of the scope")
TRUNK_OPTION = typer.Option(None, "--trunk", help="Trunk (organization) id")
BRANCH_OPTION = typer.Option(None, "--branch", help="Branch id")
FILTER_OPTION = typer.Option(None, "--filter", "-f", help="Query filter as key=value, repeatable")


@dataclass(frozen=True)
class ScopeDefaults:
    """Scope values given to the root command, stored on ``ctx.obj``."""

    hostname: Optional[str] = None
    trunk: Optional[str] = None
    branch: Optional[str] = None


def resolve_scope(
    ctx: typer.Context,
    hostname: str | None = None,
    trunk: str | None = None,
    branch: str | None = None,
) -> Scope:
    """Pick the scope for a command, or exit with an error message.

    Order per field: command option > root option or FORTE_* variable. When
    neither hostname nor trunk is given anywhere, the scope saved by
    ``forte auth login`` is used, narrowed to ``branch`` if one was given.
    """
    from forte.auth.storage import load_login

    defaults = ctx.find_root().obj
    if not isinstance(defaults, ScopeDefaults):
        defaults = ScopeDefaults()

    hostname = hostname or defaults.hostname
    trunk = trunk or defaults.trunk
    branch = branch or defaults.branch

    if hostname is None and trunk is None:
        login = load_login()
        if login is not None and login.scope is not None:
            return login.scope.with_branch(branch) if branch else login.scope
        _console.print(
            "[red]No scope. Pass --hostname and --trunk, set FORTE_HOSTNAME and FORTE_TRUNK, "
            "or run 'forte auth login'.[/red]"
        )
        raise typer.Exit(1)

    try:
        return Scope(hostname, trunk, branch)
    except InvalidScopeError as e:
        _console.print(f"[red]Invalid scope: {e}[/red]")
        raise typer.Exit(1)


def get_authenticated_client(
    ctx: typer.Context,
    hostname: str | None = None,
    trunk: str | None = None,
    branch: str | None = None,
) -> Any:
    """Get a ForteClient for the resolved scope, or exit with an error message."""
    from forte.client import ForteClient

    scope = resolve_scope(ctx, hostname, trunk, branch)
    try:
        return ForteClient(scope=scope)
    except InvalidCredentialsError:
        _console.print("[red]Not authenticated. Run 'forte auth login' or set FORTE_BEARER_TOKEN.[/red]")
        raise typer.Exit(1)


def parse_filters(pairs: list[str] | None) -> dict[str, str]:
    """Turn ``["status=active", "limit=5"]`` into a dict."""
    filters: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got {pair!r}", param_hint="--filter")
        filters[key] = value
    return filters


def print_data(console: Console, data: Any) -> None:
    if isinstance(data, (dict, list)):
        console.print_json(data=data)
    elif data:
        console.print(data)
    else:
        console.print("[dim](empty response)[/dim]")


def exit_on_api_error(console: Console, error: APIError) -> None:
    console.print(f"[red]Request failed ({error.status_code}): {error.message}[/red]")
    raise typer.Exit(1)
