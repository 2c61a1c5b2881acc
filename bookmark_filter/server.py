"""MCP server exposing the bookmark filter to long-running hosts."""
import asyncio
import logging
from typing import Any, Optional, Tuple

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from bookmark_filter.bookmarks_reader import Bookmark, read_bookmarks
from bookmark_filter.config import get_config
from bookmark_filter.errors import BookmarkFilterError
from bookmark_filter.items import build_items, normalize_query, render_items
from bookmark_filter.main import configure_logging
from bookmark_filter.search import get_search_engine

logger = logging.getLogger(__name__)


# Global state: read-only snapshot shared by every query, replaced only on reload
_bookmarks_snapshot: Optional[Tuple[Bookmark, ...]] = None


def load_bookmarks() -> Tuple[Bookmark, ...]:
    """Load bookmarks, using the current snapshot if there is one.

    Returns:
        Tuple of bookmarks

    Raises:
        BookmarkFilterError: If config or the bookmarks file is invalid
    """
    global _bookmarks_snapshot

    if _bookmarks_snapshot is None:
        _bookmarks_snapshot = _read_snapshot()

    return _bookmarks_snapshot


def reload_bookmarks() -> Tuple[Bookmark, ...]:
    """Re-read the bookmarks file and swap in the new snapshot.

    The old snapshot stays in place if reading fails.
    """
    global _bookmarks_snapshot

    _bookmarks_snapshot = _read_snapshot()
    return _bookmarks_snapshot


def _read_snapshot() -> Tuple[Bookmark, ...]:
    config = get_config()
    bookmarks = tuple(read_bookmarks(config.bookmarks_file, skip_invalid=config.skip_invalid))
    logger.info("Loaded %d bookmarks from %s", len(bookmarks), config.bookmarks_file)
    return bookmarks


async def search_bookmarks_tool(query: str) -> list[TextContent]:
    """Tool handler for search_bookmarks.

    Args:
        query: Raw query as typed

    Returns:
        List with one TextContent holding Alfred script filter JSON
    """
    try:
        config = get_config()
        bookmarks = load_bookmarks()
    except BookmarkFilterError as e:
        logger.error("Could not load bookmarks: %s", e)
        return [TextContent(type="text", text=f"Error loading bookmarks: {e}")]

    items = build_items(
        bookmarks,
        normalize_query(query),
        config.default_search_url,
        get_search_engine(config.matcher),
        limit=config.max_results,
    )
    return [TextContent(type="text", text=render_items(items))]


async def reload_bookmarks_tool() -> list[TextContent]:
    """Tool handler for reload_bookmarks."""
    try:
        bookmarks = reload_bookmarks()
    except BookmarkFilterError as e:
        logger.error("Reload failed: %s", e)
        return [TextContent(type="text", text=f"Error reloading bookmarks: {e}")]

    return [TextContent(type="text", text=f"Reloaded {len(bookmarks)} bookmarks.")]


def create_server() -> Server:
    """Create and configure the MCP server.

    Returns:
        Configured Server instance
    """
    server = Server("bookmark-filter")

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name="search_bookmarks",
                description="Filter bookmarks by name with a fuzzy or substring query. Returns launcher items (title, subtitle, arg) as JSON, best matches first.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "query": {
                            "type": "string",
                            "description": "Query to match against bookmark names. Empty returns the search placeholder."
                        }
                    },
                    "required": ["query"]
                }
            ),
            Tool(
                name="reload_bookmarks",
                description="Re-read the bookmarks file so later searches see its current contents.",
                inputSchema={"type": "object", "properties": {}}
            ),
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Any) -> list[TextContent]:
        """Handle tool calls."""
        if name == "search_bookmarks":
            query = (arguments or {}).get("query", "")
            return await search_bookmarks_tool(query)
        elif name == "reload_bookmarks":
            return await reload_bookmarks_tool()
        else:
            raise ValueError(f"Unknown tool: {name}")

    return server


async def main():
    """Main entry point for the MCP server."""
    server = create_server()

    async with stdio_server() as (read_stream, write_stream):
        initialization_options = server.create_initialization_options()
        await server.run(read_stream, write_stream, initialization_options)


def run():
    """Console script entry point."""
    try:
        log_level = get_config().log_level
    except BookmarkFilterError:
        # Reported again by the tools once a client calls them
        log_level = "INFO"
    configure_logging(log_level)
    asyncio.run(main())


if __name__ == "__main__":
    run()
