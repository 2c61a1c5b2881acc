"""Shared fixtures for tests."""
import json
import pytest

from bookmark_filter import config as config_module
from bookmark_filter import server as server_module
from bookmark_filter.bookmarks_reader import Bookmark


SAMPLE_BOOKMARKS = {
    "Work": [
        {"title": "Dashboard", "href": "http://www.test.blub"},
        {"title": "Jira Board", "href": "https://jira.example.com/board"},
    ],
    "Docs": [
        {"title": "Python Docs", "href": "https://docs.python.org"},
        {"title": "SQLite Guide", "href": "https://sqlite.org/guide"},
    ],
    "Other": [
        {"title": "Stack Overflow", "href": "https://stackoverflow.com", "tags": ["qa"]},
    ],
}

DEFAULT_SEARCH_URL = "https://duckduckgo.com"


@pytest.fixture(autouse=True)
def reset_global_state(monkeypatch):
    """Drop cached config and bookmark snapshot between tests."""
    monkeypatch.setattr(config_module, "_config", None)
    monkeypatch.setattr(server_module, "_bookmarks_snapshot", None)


@pytest.fixture
def sample_bookmarks_path(tmp_path):
    """Create a temporary bookmarks file with sample data."""
    bookmarks_file = tmp_path / "bookmarks.json"
    bookmarks_file.write_text(json.dumps(SAMPLE_BOOKMARKS, indent=2), encoding="utf-8")
    return bookmarks_file


@pytest.fixture
def sample_bookmarks():
    """Return sample bookmarks as read_bookmarks returns them."""
    return [
        Bookmark("Dashboard", "http://www.test.blub"),
        Bookmark("Jira Board", "https://jira.example.com/board"),
        Bookmark("Python Docs", "https://docs.python.org"),
        Bookmark("SQLite Guide", "https://sqlite.org/guide"),
        Bookmark("Stack Overflow", "https://stackoverflow.com"),
    ]


@pytest.fixture
def filter_env(monkeypatch, sample_bookmarks_path):
    """Set the required environment and clear the optional one."""
    monkeypatch.setenv("BOOKMARKS_FILE", str(sample_bookmarks_path))
    monkeypatch.setenv("DEFAULT_SEARCH_URL", DEFAULT_SEARCH_URL)
    for name in ("BOOKMARKS_MATCHER", "BOOKMARKS_MAX_RESULTS", "BOOKMARKS_SKIP_INVALID", "BOOKMARKS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return sample_bookmarks_path
