"""Organization commands for the Forte CLI."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from forte.cli.commands import (
    FILTER_OPTION,
    HOSTNAME_OPTION,
    TRUNK_OPTION,
    exit_on_api_error,
    get_authenticated_client,
    parse_filters,
    print_data,
)
from forte.exceptions import APIError

app = typer.Typer(help="Look up organizations")
console = Console()


@app.command("list")
def list_organizations(
    ctx: typer.Context,
    filters: list[str] = FILTER_OPTION,
    hostname: str = HOSTNAME_OPTION,
    trunk: str = TRUNK_OPTION,
) -> None:
    """List organizations matching the filters."""
    query = parse_filters(filters)
    if not query:
        raise typer.BadParameter("At least one filter is required", param_hint="--filter")

    client = get_authenticated_client(ctx, hostname, trunk)

    try:
        response = client.organizations.get_many(query)
    except APIError as e:
        exit_on_api_error(console, e)
    finally:
        client.close()

    organizations = response.data if isinstance(response.data, list) else []
    if not organizations:
        console.print("[yellow]No organizations found.[/yellow]")
        return

    table = Table(title="Organizations")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", max_width=50)
    table.add_column("Hostname", style="green")

    for organization in organizations:
        table.add_row(
            str(organization.get("id", "")),
            organization.get("name", ""),
            organization.get("hostname", ""),
        )

    console.print(table)


@app.command()
def get(
    ctx: typer.Context,
    organization_id: str = typer.Argument(help="Organization id, or a hostname with --by-hostname"),
    by_hostname: bool = typer.Option(False, "--by-hostname", help="Treat the argument as a hostname"),
    hostname: str = HOSTNAME_OPTION,
    trunk: str = TRUNK_OPTION,
) -> None:
    """Show one organization."""
    client = get_authenticated_client(ctx, hostname, trunk)

    try:
        if by_hostname:
            response = client.organizations.get_one_by_hostname(organization_id)
        else:
            response = client.organizations.get_one(organization_id)
        print_data(console, response.data)
    except APIError as e:
        exit_on_api_error(console, e)
    finally:
        client.close()
