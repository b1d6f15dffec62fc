#!/usr/bin/env python3
"""Reader CLI - search the catalog and save books from the details view."""
import argparse
import asyncio
import sys
import json
from tabulate import tabulate
from bookdetails.client import GoogleBooksClient
from bookdetails.async_client import AsyncGoogleBooksClient
from bookdetails.auth import Session
from bookdetails.database import DocumentStore
from bookdetails.loader import DetailsViewModel
from bookdetails.navigation import Navigator, ReaderScreens
from bookdetails.parse import parse_search_response
from bookdetails.screen import BookDetailsScreen
from bookdetails.config import Config
import logging

logger = logging.getLogger(__name__)


def search_books(args, config: Config):
    """List catalog matches so an id can be opened with `details`."""
    with GoogleBooksClient(
        api_key=config.GOOGLE_BOOKS_API_KEY,
        timeout=config.DEFAULT_TIMEOUT
    ) as client:
        response = client.search(args.query, max_results=args.limit)

        if not response:
            logger.error("Failed to fetch data")
            return

        records = parse_search_response(response)
        logger.info(f"Found {len(records)} books")
        display_records(records, args.format)


def display_records(records, format_type: str):
    """Display search results in specified format."""
    if format_type == "table":
        headers = ["ID", "Title", "Authors", "Published"]
        rows = [
            [
                record.id,
                (record.title or "No Title")[:50],
                record.authors_str[:30],
                record.published_date or "Unknown"
            ]
            for record in records
        ]
        print("\n" + tabulate(rows, headers=headers, tablefmt="grid"))

    elif format_type == "json":
        print(json.dumps(
            [{"id": r.id, "title": r.title, "authors": r.authors} for r in records],
            indent=2
        ))


async def show_details(args, config: Config):
    """Open the details screen for one volume and optionally save it."""
    navigator = Navigator(ReaderScreens.SearchScreen.value)
    navigator.navigate(ReaderScreens.DetailScreen.value)
    session = Session(args.user or config.READER_USER_ID)

    async with AsyncGoogleBooksClient(
        api_key=config.GOOGLE_BOOKS_API_KEY,
        timeout=config.DETAILS_TIMEOUT
    ) as client:
        screen = BookDetailsScreen(navigator, args.book_id, DetailsViewModel(client), session, None)
        print(screen.render())
        await screen.load()
        print("\n" + screen.render())

    if not args.save or screen.is_loading:
        return

    # The store is only opened once there is something to save
    with DocumentStore(config.DATABASE_URL) as store:
        store.init_schema()
        screen.collection = store.collection(config.BOOKS_COLLECTION)
        if screen.on_save():
            print(f"\n✅ Saved to '{config.BOOKS_COLLECTION}', back on {navigator.current}")


def list_saved(args, config: Config):
    """Show books saved by a user."""
    with DocumentStore(config.DATABASE_URL) as store:
        store.init_schema()
        user_id = args.user or config.READER_USER_ID or "null"
        docs = store.collection(config.BOOKS_COLLECTION).find_by_user(user_id, args.limit)
        rows = [[d.get("id"), d.get("title"), d.get("authors"), d.get("page_count")] for d in docs]
        print("\n" + tabulate(rows, headers=["ID", "Title", "Authors", "Pages"], tablefmt="grid"))


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Reader - catalog search and book details",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s search "python programming"
  %(prog)s details zyTCAlFPjgYC
  %(prog)s details zyTCAlFPjgYC --save --user alice
  %(prog)s saved --user alice
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for books")
    search_parser.add_argument("query", help="Search query")
    search_parser.add_argument("--limit", type=int, default=10, help="Max results (default: 10)")
    search_parser.add_argument("--format", choices=["table", "json"], default="table", help="Output format")

    details_parser = subparsers.add_parser("details", help="Show book details")
    details_parser.add_argument("book_id", help="Google Books volume id")
    details_parser.add_argument("--save", action="store_true", help="Save the book to your collection")
    details_parser.add_argument("--user", help="User id (default: READER_USER_ID)")

    saved_parser = subparsers.add_parser("saved", help="List saved books")
    saved_parser.add_argument("--user", help="User id (default: READER_USER_ID)")
    saved_parser.add_argument("--limit", type=int, default=100, help="Max results (default: 100)")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = Config()
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        if args.command == "search":
            search_books(args, config)

        elif args.command == "details":
            asyncio.run(show_details(args, config))

        elif args.command == "saved":
            list_saved(args, config)

    except KeyboardInterrupt:
        logger.info("\n⚠️  Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
