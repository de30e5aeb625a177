"""Content commands for the Forte CLI."""

from __future__ import annotations

import typer
from rich.console import Console

from forte.cli.commands import (
    BRANCH_OPTION,
    FILTER_OPTION,
    HOSTNAME_OPTION,
    TRUNK_OPTION,
    exit_on_api_error,
    get_authenticated_client,
    parse_filters,
    print_data,
)
from forte.exceptions import APIError, InvalidArgumentError

app = typer.Typer(help="Read branch content")
console = Console()


@app.command("list")
def list_content(
    ctx: typer.Context,
    content_type: str = typer.Argument(help="Content type, e.g. products"),
    filters: list[str] = FILTER_OPTION,
    hostname: str = HOSTNAME_OPTION,
    trunk: str = TRUNK_OPTION,
    branch: str = BRANCH_OPTION,
) -> None:
    """List content items of one type."""
    query = parse_filters(filters)
    client = get_authenticated_client(ctx, hostname, trunk, branch)

    try:
        response = client.content.get_many(content_type, query)
        print_data(console, response.data)
    except InvalidArgumentError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except APIError as e:
        exit_on_api_error(console, e)
    finally:
        client.close()


@app.command()
def get(
    ctx: typer.Context,
    content_type: str = typer.Argument(help="Content type, e.g. products"),
    content_id: str = typer.Argument(help="Content item id"),
    hostname: str = HOSTNAME_OPTION,
    trunk: str = TRUNK_OPTION,
    branch: str = BRANCH_OPTION,
) -> None:
    """Show one content item."""
    client = get_authenticated_client(ctx, hostname, trunk, branch)

    try:
        response = client.content.get_one(content_type, content_id)
        print_data(console, response.data)
    except InvalidArgumentError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except APIError as e:
        exit_on_api_error(console, e)
    finally:
        client.close()
