"""Command line interface.

Usage:
    hn-client front-page
    hn-client search "sqlite wal" --hits 20 --relevance
    hn-client user pg
    hn-client --debug item 8863
"""

import argparse
import asyncio
import logging
from typing import Optional

from hn_client.client import HackerNewsClient
from hn_client.errors import HNClientError
from hn_client.item_api.models import Item
from hn_client.search.client import SearchResponse
from hn_client.search.models import CommentHit, Hit, JobHit, PollHit, StoryHit
from hn_client.search.query import SearchParameters
from hn_client.utils.logging_config import setup_logging

LISTINGS = {
    "front-page": "front_page",
    "newest": "newest",
    "ask": "ask_hn",
    "show": "show_hn",
    "jobs": "jobs",
    "polls": "polls",
    "comments": "comments",
    "hiring": "who_is_hiring",
}


def format_hit(hit: Hit) -> str:
    """One-line summary of a hit."""
    if isinstance(hit, StoryHit):
        points = hit.points if hit.points is not None else 0
        return f"[{points} pts] {hit.display_title} ({hit.effective_url})"
    if isinstance(hit, CommentHit):
        return hit.display_title
    if isinstance(hit, JobHit):
        return f"[job] {hit.display_title}"
    if isinstance(hit, PollHit):
        return f"[poll] {hit.title}"
    return f"[{hit.kind}] {hit.permalink}"


def display_response(response: SearchResponse) -> None:
    """Print a numbered listing of one result page."""
    meta = response.meta
    if not response.data:
        print("\n⚠️  No results")
        return

    print("\n" + "=" * 70)
    print(
        f"Page {meta.current_page + 1}/{max(meta.number_of_pages, 1)} "
        f"({meta.number_of_hits} hits, {meta.time_ms_processing}ms)"
    )
    print("=" * 70)

    for idx, hit in enumerate(response.data, start=1):
        print(f"{idx}. {format_hit(hit)}")
        if hit.author:
            print(f"   by {hit.author} · {hit.permalink}")

    print("=" * 70)


def display_item(item: Optional[Item]) -> None:
    if item is None:
        print("\n⚠️  Item not found")
        return
    label = item.type.value if item.type else "item"
    print(f"\n[{label}] {item.title or ''} by {item.by or '[deleted]'}")
    if item.url:
        print(f"   {item.url}")
    if item.kids:
        print(f"   {len(item.kids)} direct replies")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hn-client", description="Query Hacker News")
    parser.add_argument("--debug", action="store_true", help="Log requests and responses")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--hits", type=int, default=None, help="Hits per page (1-100)")
    common.add_argument("--page", type=int, default=None, help="0-based page number")
    common.add_argument(
        "--relevance", action="store_true", help="Sort by relevance instead of date"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    for name in LISTINGS:
        subparsers.add_parser(name, parents=[common])

    search = subparsers.add_parser("search", parents=[common])
    search.add_argument("query")

    user = subparsers.add_parser("user", parents=[common])
    user.add_argument("name")

    item = subparsers.add_parser("item")
    item.add_argument("id", type=int)

    return parser


def params_from_args(args: argparse.Namespace) -> SearchParameters:
    return SearchParameters(
        query=getattr(args, "query", None),
        page=args.page,
        hits_per_page=args.hits,
        sort_by_date=not args.relevance,
    )


async def run(args: argparse.Namespace) -> None:
    client = HackerNewsClient(debug=args.debug, logger=logging.getLogger("hn_client"))

    if args.command == "item":
        display_item(await client.items.item(args.id))
        return

    params = params_from_args(args)
    if args.command == "search":
        response = await client.search(params)
    elif args.command == "user":
        response = await client.user_all(args.name, params)
    else:
        response = await getattr(client, LISTINGS[args.command])(params)
    display_response(response)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level="DEBUG" if args.debug else None, use_json=args.json_logs)
    logger = logging.getLogger(__name__)

    try:
        asyncio.run(run(args))
    except HNClientError as e:
        logger.error(f"Request failed: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\n⚠️  Cancelled")
        return 130
    return 0
