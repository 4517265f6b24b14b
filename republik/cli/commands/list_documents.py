"""List command: newest documents from the search endpoint."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from republik.api import DocumentFilter
from republik.cli.utils.client import get_client
from republik.exceptions import RemoteQueryError

app = typer.Typer(help="List the newest documents")
console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    feed: bool = typer.Option(False, "--feed", help="Only documents in the feed"),
    has_audio: bool = typer.Option(
        False, "--has-audio", help="Only documents with an audio version"
    ),
    audio_source_kind: Optional[str] = typer.Option(
        None, "--audio-source-kind", help="Audio source kind, e.g. readAloud"
    ),
    format: Optional[str] = typer.Option(
        None, "--format", help="Repo id of the parent format"
    ),
    limit: int = typer.Option(20, "--limit", "-n", help="Number of documents"),
):
    """List documents, newest first."""
    client = get_client(ctx)
    doc_filter = DocumentFilter(
        feed=feed,
        has_audio=has_audio,
        audio_source_kind=audio_source_kind,
        format=format,
    )

    try:
        documents = client.fetch(doc_filter, limit=limit)
    except RemoteQueryError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    if not documents:
        console.print("No documents found")
        return

    table = Table("Published", "Title", "Path", "Minutes")
    for doc in documents:
        published = doc.pub_date
        minutes = doc.meta.estimated_reading_minutes
        table.add_row(
            published.strftime("%Y-%m-%d") if published else "",
            doc.meta.title or "",
            doc.meta.path or "",
            str(minutes) if minutes is not None else "",
        )
    console.print(table)
