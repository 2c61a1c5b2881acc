"""Command line entry point: filter bookmarks for a launcher query.

Usage::

    BOOKMARKS_FILE=~/bookmarks.json DEFAULT_SEARCH_URL=https://duckduckgo.com \\
        bookmark-filter "dash"

Prints Alfred script filter JSON on stdout. Logs and errors go to stderr.
"""
import logging
import sys
from typing import List, Optional

from bookmark_filter.bookmarks_reader import read_bookmarks
from bookmark_filter.config import Config
from bookmark_filter.errors import BookmarkFilterError
from bookmark_filter.items import Item, build_items, normalize_query, render_items
from bookmark_filter.search import get_search_engine

logger = logging.getLogger("bookmark_filter")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Send package logs to stderr; stdout carries the launcher output."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def run_query(config: Config, raw_query: Optional[str]) -> List[Item]:
    """Load bookmarks and build the items for one query.

    The bookmarks file is read even when there is no query, so a broken
    setup is reported right away.

    Raises:
        BookmarkFilterError: If the bookmarks file can't be loaded
    """
    bookmarks = read_bookmarks(config.bookmarks_file, skip_invalid=config.skip_invalid)
    logger.debug("Loaded %d bookmarks from %s", len(bookmarks), config.bookmarks_file)

    engine = get_search_engine(config.matcher)
    query = normalize_query(raw_query)
    return build_items(bookmarks, query, config.default_search_url, engine, limit=config.max_results)


def main(argv: Optional[List[str]] = None) -> int:
    """Run one query and print the result items.

    Args:
        argv: Command line arguments without the program name. The first one,
            if any, is the query.

    Returns:
        Process exit code
    """
    if argv is None:
        argv = sys.argv[1:]
    raw_query = argv[0] if argv else None

    configure_logging()
    try:
        config = Config.from_env()
        configure_logging(config.log_level)
        items = run_query(config, raw_query)
    except BookmarkFilterError as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_items(items))
    return 0


if __name__ == "__main__":
    sys.exit(main())
