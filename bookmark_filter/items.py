"""Launcher result items for bookmark queries."""
import json
from dataclasses import dataclass, asdict
from typing import List, Optional, Sequence

from bookmark_filter.bookmarks_reader import Bookmark
from bookmark_filter.search import DEFAULT_LIMIT, SearchEngine

BOOKMARK_SUBTITLE = "Open in browser →"
PLACEHOLDER_SUBTITLE = "Open them →"


@dataclass(frozen=True)
class Item:
    """One row in the launcher: what it shows and the URL it opens."""
    title: str
    subtitle: str
    arg: str


def normalize_query(raw: Optional[str]) -> str:
    """Trim and lowercase a raw query. A missing query becomes ``""``."""
    if raw is None:
        return ""
    return raw.strip().lower()


def empty_item(default_search_url: str) -> Item:
    """Item shown before anything has been typed."""
    return Item("Search for bookmarks", PLACEHOLDER_SUBTITLE, default_search_url)


def not_found_item(query: str, default_search_url: str) -> Item:
    """Item shown when the query matches no bookmark."""
    return Item(f"nothing found for {query}, try search on website", PLACEHOLDER_SUBTITLE, default_search_url)


def bookmark_item(bookmark: Bookmark) -> Item:
    return Item(bookmark.name, BOOKMARK_SUBTITLE, bookmark.link)


def build_items(
    bookmarks: Sequence[Bookmark],
    query: str,
    default_search_url: str,
    engine: SearchEngine,
    limit: int = DEFAULT_LIMIT,
) -> List[Item]:
    """Turn a normalized query into the items to display.

    Args:
        bookmarks: All loaded bookmarks
        query: Query as returned by :func:`normalize_query`
        default_search_url: URL opened by the placeholder items
        engine: Search engine used to rank bookmarks
        limit: Maximum number of bookmark items

    Returns:
        Ranked bookmark items, or a single placeholder item when there is no
        query or nothing matches
    """
    if not query:
        return [empty_item(default_search_url)]

    matches = engine.search(query, bookmarks, limit=limit)
    if not matches:
        return [not_found_item(query, default_search_url)]

    return [bookmark_item(bookmark) for bookmark in matches]


def render_items(items: Sequence[Item]) -> str:
    """Serialize items as Alfred script filter JSON."""
    return json.dumps({"items": [asdict(item) for item in items]}, ensure_ascii=False)
