"""CLI entry point for FusionKit docs."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Literal, Optional, cast

from fusionkit_docs.config import LOG_LEVELS, configure, get_settings
from fusionkit_docs.indexing import DocIndexer
from fusionkit_docs.ingesters import get_ingester
from fusionkit_docs.models import Category

logger = logging.getLogger(__name__)


def _resolve_docs(docs: Optional[str]) -> Path:
    """Apply a --docs override and make sure the source is usable."""
    settings = configure(docs_path=docs)
    docs_path = settings.docs_path
    if get_ingester(docs_path) is None:
        logger.error(f"Docs not found: {docs_path}")
        logger.error("Supported inputs: folders, .zip files")
        sys.exit(1)
    return docs_path


def serve(docs: Optional[str], transport: str = "stdio", cache: bool = False) -> None:
    """Start the MCP server for a documentation source.

    Args:
        docs: Path to a docs folder or zip (defaults to FUSIONKIT_DOCS_PATH)
        transport: Transport protocol (stdio or sse)
        cache: Reuse the index while the docs are unchanged
    """
    if cache:
        configure(cache_index=True)
    docs_path = _resolve_docs(docs)

    # Import here to avoid loading MCP unless needed
    from fusionkit_docs.server import create_mcp_server

    logger.info(f"Serving {docs_path} via {transport}")
    mcp = create_mcp_server(docs_path)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def info(docs: Optional[str]) -> None:
    """Show what the index of a documentation source contains.

    Args:
        docs: Path to a docs folder or zip
    """
    docs_path = _resolve_docs(docs)
    indexed = DocIndexer(docs_path).index_docs()

    print(f"Docs: {docs_path}")
    print(f"  Source: {get_ingester(docs_path).source_type}")
    print(f"  Files: {indexed.file_count}")
    print(f"")
    print(f"Sections:")
    for category in Category:
        print(f"  {category.value:<10} {len(indexed.by_category(category)):>5}")
    print(f"  {'total':<10} {len(indexed.all):>5}")


def search(query: str, docs: Optional[str], limit: int = 10) -> None:
    """Print sections whose title, content or path contain query.

    Args:
        query: Case-insensitive search text
        docs: Path to a docs folder or zip
        limit: Maximum number of results to print
    """
    docs_path = _resolve_docs(docs)
    results = DocIndexer(docs_path).find_content(query)

    if not results:
        print(f"No results found for: {query}")
        return

    for i, section in enumerate(results[:limit], 1):
        text = section.content[:200].replace("\n", " ")
        if len(section.content) > 200:
            text += "..."
        print(f"{i}. {section.title}  [{section.file_path}, h{section.level}]")
        print(f"   {text}")
        print("")

    if len(results) > limit:
        print(f"... {len(results) - limit} more")


def deck(docs: Optional[str]) -> None:
    """Launch the Docs Deck TUI for browsing an index."""
    from fusionkit_docs.docs_deck import main as docs_deck_main

    docs_deck_main(docs or str(get_settings().docs_path))


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="fusionkit-docs",
        description="FusionKit Docs - documentation tools over MCP",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: FUSIONKIT_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start MCP server for a documentation folder or zip",
    )
    serve_parser.add_argument("--docs", help="Docs folder or .zip (default: FUSIONKIT_DOCS_PATH)")
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    serve_parser.add_argument(
        "--cache",
        action="store_true",
        help="Reuse the index until a markdown file changes",
    )

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show section counts per category",
    )
    info_parser.add_argument("--docs", help="Docs folder or .zip")

    # search command
    search_parser = subparsers.add_parser(
        "search",
        help="Search section titles, content and paths",
    )
    search_parser.add_argument("query", help="Text to look for (case-insensitive)")
    search_parser.add_argument("--docs", help="Docs folder or .zip")
    search_parser.add_argument(
        "-n",
        "--limit",
        type=int,
        default=10,
        help="Maximum results to show (default: 10)",
    )

    # deck command
    deck_parser = subparsers.add_parser(
        "deck",
        help="Launch Docs Deck TUI for interactive browsing",
    )
    deck_parser.add_argument("--docs", help="Docs folder or .zip to open")

    args = parser.parse_args()

    settings = configure(log_level=args.log_level)
    if args.command == "serve":
        # stdout carries the MCP stream, keep logs on stderr
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
    else:
        logging.basicConfig(level=settings.log_level, format="%(message)s")

    if args.command == "serve":
        serve(args.docs, args.transport, args.cache)
    elif args.command == "info":
        info(args.docs)
    elif args.command == "search":
        search(args.query, args.docs, args.limit)
    elif args.command == "deck":
        deck(args.docs)


if __name__ == "__main__":
    main()
