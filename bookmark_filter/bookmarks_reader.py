"""Bookmarks document reader.

The document is a JSON object mapping a group (folder) name to an array of
bookmark objects, each carrying at least a ``title`` and an ``href``::

    {
        "Work": [{"title": "Dashboard", "href": "https://dash.example.com"}],
        "Docs": [{"title": "Python", "href": "https://docs.python.org"}]
    }

Groups are flattened into one sequence, in document order.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List

from bookmark_filter.errors import BookmarksFileError, ParseError, SchemaError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bookmark:
    """A saved link and the name it is displayed under."""
    name: str
    link: str

    @classmethod
    def from_entry(cls, entry: Any) -> "Bookmark":
        """Build a bookmark from one entry of a group array.

        Raises:
            SchemaError: If the entry is not an object or lacks a non-empty
                string ``title`` or ``href``
        """
        if not isinstance(entry, dict):
            raise SchemaError(f"Bookmark entry must be an object, got {type(entry).__name__}")

        name = entry.get("title")
        link = entry.get("href")
        if not isinstance(name, str) or not name:
            raise SchemaError(f"Bookmark entry has no valid 'title': {entry!r}")
        if not isinstance(link, str) or not link:
            raise SchemaError(f"Bookmark entry has no valid 'href': {entry!r}")

        return cls(name=name, link=link)


def parse_bookmarks(document: str, skip_invalid: bool = False) -> List[Bookmark]:
    """Parse a bookmarks document into a flat list of bookmarks.

    Args:
        document: JSON text of the bookmarks document
        skip_invalid: Skip and log invalid groups or entries instead of
            failing the whole load

    Returns:
        Bookmarks in document order (group order, then entry order)

    Raises:
        ParseError: If the document is not valid JSON
        SchemaError: If the document is not an object, or (unless
            ``skip_invalid``) any group or entry is invalid
    """
    try:
        data = json.loads(document)
    except json.JSONDecodeError as e:
        raise ParseError(f"Bookmarks document is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SchemaError(f"Bookmarks document must be an object, got {type(data).__name__}")

    bookmarks = []
    for group, entries in data.items():
        if not isinstance(entries, list):
            error = SchemaError(f"Group {group!r} must be an array, got {type(entries).__name__}")
            if not skip_invalid:
                raise error
            logger.warning("Skipping group: %s", error)
            continue

        for entry in entries:
            try:
                bookmarks.append(Bookmark.from_entry(entry))
            except SchemaError as e:
                if not skip_invalid:
                    raise
                logger.warning("Skipping entry in group %r: %s", group, e)

    logger.debug("Parsed %d bookmarks from %d groups", len(bookmarks), len(data))
    return bookmarks


def load_bookmarks_file(bookmarks_path: Path) -> str:
    """Read the bookmarks document.

    Raises:
        BookmarksFileError: If the file is missing or unreadable
    """
    try:
        with open(bookmarks_path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise BookmarksFileError(f"Bookmarks file not found at {bookmarks_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise BookmarksFileError(f"Could not read bookmarks file {bookmarks_path}: {e}") from e


def read_bookmarks(bookmarks_path: Path, skip_invalid: bool = False) -> List[Bookmark]:
    """Read all bookmarks from a bookmarks document on disk.

    Args:
        bookmarks_path: Path to the JSON document
        skip_invalid: See :func:`parse_bookmarks`

    Returns:
        List of bookmarks in document order
    """
    return parse_bookmarks(load_bookmarks_file(bookmarks_path), skip_invalid=skip_invalid)
