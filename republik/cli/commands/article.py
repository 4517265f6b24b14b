"""Article command: fetch one document and print or write its HTML."""

from typing import Optional

import typer
from rich.console import Console

from republik.cli.utils.client import get_client
from republik.exceptions import RemoteQueryError

console = Console()


def main(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Document path, e.g. /2024/01/05/slug"),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Write HTML to this file instead of stdout"
    ),
    page: bool = typer.Option(
        False, "--page", help="Wrap the article in a standalone HTML page"
    ),
):
    """Fetch the article at PATH and render it."""
    client = get_client(ctx)

    try:
        resp = client.fetch_article(path)
    except RemoteQueryError as e:
        console.print(f"[bold red]Error:[/bold red] Fetching article {path} failed: {e}")
        raise typer.Exit(1)

    html = client.renderer.render(resp.article)
    if page:
        html = client.renderer.render_full_page(resp.article.title or path, html)

    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(html)
        console.print(f"Wrote [bold]{output}[/bold]")
    else:
        typer.echo(html)
