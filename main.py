"""
Command-line entry point for the Klipy SDK.

Fetches one page of a feed and prints the justified row layout, e.g.:

    KLIPY_API_KEY=... KLIPY_CUSTOMER_ID=... python main.py trending --width 400
"""
import argparse
import asyncio
import logging
import sys

from klipy import ConfigurationError, KlipyConfig, KlipyContext, KlipyError, MediaType, layout_rows
from klipy.utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse Klipy feeds from the terminal")
    parser.add_argument("feed", choices=["trending", "search", "recent", "categories"])
    parser.add_argument("--query", "-q", help="Search query (search feed only)")
    parser.add_argument(
        "--type",
        dest="media_type",
        choices=[t.value for t in MediaType if t is not MediaType.AD],
        default=MediaType.GIF.value,
    )
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--per-page", type=int, default=24)
    parser.add_argument("--width", type=float, default=400, help="Viewport width")
    parser.add_argument("--row-height", type=float, default=100)
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


async def async_main(args: argparse.Namespace) -> int:
    logger = logging.getLogger(__name__)

    config = KlipyConfig.from_env()
    async with KlipyContext(config) as ctx:
        await ctx.load_user_agent()
        service = ctx.create_media_service(MediaType(args.media_type))

        if args.feed == "categories":
            categories = await service.fetch_categories()
            for category in categories.with_builtin_tabs():
                print(f"{category.name} ({category.type.value})")
            return 0

        if args.feed == "search":
            if not args.query:
                logger.error("--query is required for search")
                return 2
            page = await service.search(args.query, page=args.page, per_page=args.per_page)
        elif args.feed == "recent":
            page = await service.fetch_recent(page=args.page, per_page=args.per_page)
        else:
            page = await service.fetch_trending(page=args.page, per_page=args.per_page)

        logger.info(f"Page {page.current_page}: {len(page.items)} items, has_next={page.has_next}")
        for row in layout_rows(page.items, args.row_height, args.width):
            titles = ", ".join(item.title or item.slug or item.type.value for item in row.items)
            print(f"[{row.row_width:7.1f} x {row.row_height:5.1f}] {titles}")
    return 0


def main() -> int:
    args = build_parser().parse_args()
    setup_logging(root_level=logging.DEBUG if args.verbose else logging.INFO)
    logger = logging.getLogger(__name__)

    try:
        return asyncio.run(async_main(args))
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 2
    except KlipyError as e:
        logger.error(f"Request failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
