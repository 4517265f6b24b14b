#!/usr/bin/env python
"""Command line interface for the Republik client."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from republik.cli.commands import article, list_documents

app = typer.Typer(help="Command Line Interface for the Republik content API")
console = Console()

# Add commands; "article" is a plain command so options may follow PATH
app.add_typer(list_documents.app, name="list")
app.command("article", help="Render an article as HTML")(article.main)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
    )


@app.callback()
def callback(
    ctx: typer.Context,
    sid: str = typer.Option(
        "",
        "--sid",
        envvar="REPUBLIK_SID",
        help="Session id sent as the connect.sid cookie",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
):
    """Fetch Republik articles and render them as HTML."""
    _configure_logging(verbose)
    ctx.obj = {"sid": sid}


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
