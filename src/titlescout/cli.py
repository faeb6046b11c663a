"""Command line entry point for building marketplace searches from product pages."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import requests

from .document import HtmlDocument, fetch_document
from .marketplaces import (
    MARKETPLACE_SEARCH_TEMPLATES,
    build_search_urls,
    open_all,
    open_one,
)
from .models import ProductSearchPlan
from .query_optimizer import build_search_queries, optimize_search_queries
from .title_extractor import extract_title


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""

    parser = argparse.ArgumentParser(
        description="Extract product titles and build marketplace search queries"
    )
    parser.add_argument(
        "--timeout", type=int, default=20, help="HTTP timeout in seconds when fetching pages"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    title = commands.add_parser("title", help="Print the cleaned product title of a page")
    title.add_argument("source", help="http(s) URL or path to a saved HTML file")

    queries = commands.add_parser("queries", help="Print main, core and simple search queries")
    queries.add_argument("name", help="Product name")

    urls = commands.add_parser("urls", help="Print marketplace search URLs for a query")
    urls.add_argument("query", help="Search query")
    opening = urls.add_mutually_exclusive_group()
    opening.add_argument("--open", action="store_true", help="Open every URL in the browser")
    opening.add_argument(
        "--open-in",
        metavar="MARKETPLACE",
        help=f"Open one marketplace ({', '.join(MARKETPLACE_SEARCH_TEMPLATES)})",
    )

    plan = commands.add_parser("plan", help="Print title, queries and URLs of a page as JSON")
    plan.add_argument("source", help="http(s) URL or path to a saved HTML file")
    return parser


def load_document(
    source: str, parser: argparse.ArgumentParser, *, timeout: int
) -> HtmlDocument:
    """Fetch a URL or read a local file, reporting failures through ``parser``."""

    if source.startswith(("http://", "https://")):
        try:
            return fetch_document(source, timeout=timeout)
        except requests.RequestException as exc:
            parser.error(f"Could not fetch {source}: {exc}")
    try:
        return HtmlDocument.from_html(Path(source).read_bytes())
    except OSError as exc:
        parser.error(f"Could not read {source}: {exc}")


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""

    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="[%(asctime)s] %(levelname)s %(message)s",
    )

    if args.command == "title":
        title = extract_title(load_document(args.source, parser, timeout=args.timeout))
        if title is None:
            print("No product title found.")
            return 1
        print(title)
        return 0

    if args.command == "queries":
        for query in optimize_search_queries(args.name):
            print(query)
        return 0

    if args.command == "urls":
        for key, url in build_search_urls(args.query).items():
            print(f"{key}\t{url}")
        if args.open:
            open_all(args.query)
        elif args.open_in and not open_one(args.open_in, args.query):
            return 1
        return 0

    title = extract_title(load_document(args.source, parser, timeout=args.timeout))
    queries = build_search_queries(title)
    result = ProductSearchPlan(title=title, queries=queries, urls=build_search_urls(queries.main))
    print(result.model_dump_json(indent=2))
    return 0 if title is not None else 1


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
