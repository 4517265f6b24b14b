"""Client construction shared by the CLI commands."""

import typer
from rich.console import Console

from republik.api import RepublikClient
from republik.exceptions import QueryResourceError

console = Console()


def get_client(ctx: typer.Context) -> RepublikClient:
    """Build a client from the options given to the root command."""
    state = ctx.obj or {}
    try:
        return RepublikClient(state.get("sid", ""))
    except QueryResourceError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)
