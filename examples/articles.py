"""Example of how to use the Republik client."""

import argparse
import logging
import os

from rich.console import Console
from rich.traceback import install

from republik import FETCH_FAILED_HTML, DocumentFilter, RepublikClient

install(show_locals=True)

console = Console()


def main():
    """Main function."""
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Republik client example.")
    parser.add_argument(
        "--sid",
        default=os.getenv("REPUBLIK_SID", ""),
        help="connect.sid session cookie (defaults to $REPUBLIK_SID)",
    )
    parser.add_argument("--limit", type=int, default=5, help="Documents to list.")
    parser.add_argument(
        "--audio", action="store_true", help="Only documents with an audio version."
    )
    args = parser.parse_args()

    client = RepublikClient(args.sid)

    documents = client.fetch(DocumentFilter(feed=True, has_audio=args.audio), args.limit)
    for doc_idx, doc in enumerate(documents):
        console.rule(f"Document #{doc_idx}")
        console.print(doc.pub_date, doc.meta.title, doc.meta.path)

    if not documents or not documents[0].meta.path:
        return

    console.rule("HTML of the newest document")
    html = client.get_article_html(documents[0].meta.path, fallback=FETCH_FAILED_HTML)
    console.print(html, markup=False, highlight=False)


if __name__ == "__main__":
    main()
