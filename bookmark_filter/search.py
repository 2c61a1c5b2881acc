"""Search engine module for bookmarks."""
import logging
from typing import Callable, List, Protocol, Sequence

from rapidfuzz import fuzz
from rapidfuzz.distance import LCSseq, Prefix

from bookmark_filter.bookmarks_reader import Bookmark
from bookmark_filter.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class SearchEngine(Protocol):
    """Protocol for search engines to allow extensibility."""

    def search(self, query: str, bookmarks: Sequence[Bookmark], limit: int = DEFAULT_LIMIT) -> List[Bookmark]:
        """Search bookmarks based on query.

        Args:
            query: Normalized (trimmed, lowercase) search query
            bookmarks: Bookmarks to search
            limit: Maximum number of results to return

        Returns:
            List of matching bookmarks, sorted by relevance
        """
        ...


def contains(bookmark: Bookmark, query: str) -> bool:
    """Check whether the bookmark name contains the query, ignoring case."""
    return query.lower() in bookmark.name.lower()


def fuzzy_score(text: str, query: str) -> int:
    """Score how well query fuzzy-matches text.

    Every character of the query has to appear in the text, in order, but not
    necessarily next to each other. Matches are ranked by contiguity first,
    then by how much of the query lines up with the start of the text, then by
    overall similarity.

    Returns:
        Positive score for a match (higher = better), 0 for no match
    """
    query = query.lower()
    text = text.lower()
    if not query or not text:
        return 0

    # LCS covering the whole query means query is a subsequence of text
    if LCSseq.similarity(query, text) < len(query):
        return 0

    contiguity = round(fuzz.partial_ratio(query, text))
    prefix = min(Prefix.similarity(query, text), 99)
    closeness = round(fuzz.ratio(query, text))

    return max(contiguity * 100_000 + prefix * 1000 + closeness, 1)


class SubstringSearchEngine:
    """Case-insensitive substring search that keeps collection order."""

    def search(self, query: str, bookmarks: Sequence[Bookmark], limit: int = DEFAULT_LIMIT) -> List[Bookmark]:
        if not query or not bookmarks:
            return []

        matches = [bookmark for bookmark in bookmarks if contains(bookmark, query)]
        logger.debug("Substring query %r matched %d of %d bookmarks", query, len(matches), len(bookmarks))
        return matches[:limit]


class FuzzySearchEngine:
    """Fuzzy search over bookmark names, best matches first."""

    def __init__(self, scorer: Callable[[str, str], int] = fuzzy_score):
        self.scorer = scorer

    def search(self, query: str, bookmarks: Sequence[Bookmark], limit: int = DEFAULT_LIMIT) -> List[Bookmark]:
        """Search bookmarks using fuzzy matching on their names.

        Args:
            query: Normalized search query
            bookmarks: Bookmarks to search
            limit: Maximum number of results to return

        Returns:
            Matching bookmarks, highest score first. Equal scores keep the
            order they had in ``bookmarks``.
        """
        if not query or not bookmarks:
            return []

        scored_bookmarks = []
        for bookmark in bookmarks:
            score = self.scorer(bookmark.name, query)
            if score > 0:
                scored_bookmarks.append((score, bookmark))

        # list.sort is stable, so ties stay in collection order
        scored_bookmarks.sort(key=lambda x: x[0], reverse=True)
        logger.debug("Fuzzy query %r matched %d of %d bookmarks", query, len(scored_bookmarks), len(bookmarks))

        return [bookmark for _, bookmark in scored_bookmarks[:limit]]


SEARCH_ENGINES = {
    "fuzzy": FuzzySearchEngine,
    "substring": SubstringSearchEngine,
}


def get_search_engine(name: str) -> SearchEngine:
    """Create the search engine registered under name.

    Raises:
        ConfigError: If no engine has that name
    """
    try:
        engine_class = SEARCH_ENGINES[name]
    except KeyError:
        choices = ", ".join(sorted(SEARCH_ENGINES))
        raise ConfigError(f"Unknown matcher {name!r}, expected one of: {choices}") from None
    return engine_class()
