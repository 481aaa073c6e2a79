"""
Command line entry point for the XMTP docs search server.

Usage:
    docs-search                       # MCP server on stdio (default)
    docs-search mcp
    docs-search http --port 8000
    docs-search search "send message" --limit 3
    docs-search show 00042 --max-chars 2000

Every command loads the document once from --source (default: DOCS_SOURCE).
Diagnostics go to stderr; stdout carries only tool output.
"""
import argparse
import logging
import sys
from typing import List, Optional

from config import (
    DOCS_SOURCE,
    DOC_FETCH_TIMEOUT,
    HOST,
    PORT,
    LOG_LEVEL,
    LOG_FORMAT,
    SEARCH_DEFAULT_LIMIT,
    SEARCH_MAX_LIMIT,
    CHUNK_DEFAULT_MAX_CHARS,
    CHUNK_MIN_MAX_CHARS,
    CHUNK_MAX_MAX_CHARS,
)
from logger import setup_logging
from services.document_loader import DocumentLoadError
from services.index_builder import build_retrieval_engine

logger = logging.getLogger(__name__)


def _bounded_int(low: int, high: int):
    def parse(value: str) -> int:
        number = int(value)
        if not low <= number <= high:
            raise argparse.ArgumentTypeError(f"must be between {low} and {high}, got {number}")
        return number
    return parse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docs-search",
        description="Keyword search and section lookup over the XMTP documentation"
    )
    parser.add_argument("--source", default=DOCS_SOURCE, help="Docs URL or local path")
    parser.add_argument("--timeout", type=float, default=DOC_FETCH_TIMEOUT, help="HTTP timeout in seconds")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    parser.add_argument("--log-format", choices=["text", "json"], default=LOG_FORMAT)

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("mcp", help="Serve the tools over MCP stdio (default)")

    http_parser = subparsers.add_parser("http", help="Serve the tools over HTTP")
    http_parser.add_argument("--host", default=HOST)
    http_parser.add_argument("--port", type=int, default=PORT)

    search_parser = subparsers.add_parser("search", help="Run one search and print JSON")
    search_parser.add_argument("query")
    search_parser.add_argument(
        "--limit",
        type=_bounded_int(1, SEARCH_MAX_LIMIT),
        default=SEARCH_DEFAULT_LIMIT
    )

    show_parser = subparsers.add_parser("show", help="Print one chunk by id")
    show_parser.add_argument("id")
    show_parser.add_argument(
        "--max-chars",
        type=_bounded_int(CHUNK_MIN_MAX_CHARS, CHUNK_MAX_MAX_CHARS),
        default=CHUNK_DEFAULT_MAX_CHARS
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the requested command and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    command = args.command or "mcp"

    if command == "search" and not args.query:
        parser.error("query must not be empty")

    setup_logging(args.log_level, args.log_format)

    try:
        engine = build_retrieval_engine(source=args.source, timeout=args.timeout)
    except DocumentLoadError as e:
        logger.error(f"Failed to load docs from {e.source}: {e}")
        return 1

    if command == "search":
        print(engine.search(args.query, args.limit).model_dump_json(by_alias=True, indent=2))
    elif command == "show":
        print(engine.get_chunk(args.id, args.max_chars))
    elif command == "http":
        import uvicorn
        import main as http_app

        http_app.retrieval_engine = engine
        logger.info(f"Starting HTTP API on {args.host}:{args.port}")
        uvicorn.run(http_app.app, host=args.host, port=args.port)
    else:
        from mcp_server import serve_stdio

        serve_stdio(engine)

    return 0


if __name__ == "__main__":
    sys.exit(main())
