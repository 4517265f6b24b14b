"""Command modules for the Republik CLI."""

from republik.cli.commands import article, list_documents

__all__ = ["article", "list_documents"]
