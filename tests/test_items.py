"""Tests for items module."""
import json
import pytest

from bookmark_filter.bookmarks_reader import Bookmark
from bookmark_filter.items import Item, build_items, normalize_query, render_items
from bookmark_filter.search import FuzzySearchEngine, SubstringSearchEngine

SEARCH_URL = "https://duckduckgo.com"


@pytest.fixture
def engine():
    return FuzzySearchEngine()


class TestNormalizeQuery:
    @pytest.mark.parametrize("raw, expected", [
        (None, ""),
        ("", ""),
        ("   ", ""),
        ("  Dash ", "dash"),
        ("JIRA Board", "jira board"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_query(raw) == expected


class TestBuildItems:
    def test_no_query_returns_placeholder(self, engine, sample_bookmarks):
        items = build_items(sample_bookmarks, "", SEARCH_URL, engine)
        assert items == [Item("Search for bookmarks", "Open them →", SEARCH_URL)]

    def test_no_query_ignores_collection(self, engine):
        assert build_items([], "", SEARCH_URL, engine) == build_items(
            [Bookmark("Dashboard", "http://a")], "", SEARCH_URL, engine
        )

    def test_no_match_returns_fallback(self, engine):
        items = build_items([Bookmark("Dashboard", "http://www.test.blub")], "z", SEARCH_URL, engine)
        assert items == [Item("nothing found for z, try search on website", "Open them →", SEARCH_URL)]

    def test_match_returns_bookmark_items(self, engine):
        items = build_items([Bookmark("Dashboard", "http://www.test.blub")], "d", SEARCH_URL, engine)
        assert items == [Item("Dashboard", "Open in browser →", "http://www.test.blub")]

    def test_items_follow_ranked_order(self, engine, sample_bookmarks):
        items = build_items(sample_bookmarks, "o", SEARCH_URL, engine)
        assert [item.arg for item in items] == [b.link for b in engine.search("o", sample_bookmarks)]

    def test_payloads_come_from_matches(self, engine, sample_bookmarks):
        items = build_items(sample_bookmarks, "board", SEARCH_URL, engine)
        assert {item.arg for item in items} == {
            "http://www.test.blub",
            "https://jira.example.com/board",
        }

    def test_caps_items(self, engine):
        bookmarks = [Bookmark(f"Page {i}", f"http://page/{i}") for i in range(15)]
        assert len(build_items(bookmarks, "page", SEARCH_URL, engine)) == 10
        assert len(build_items(bookmarks, "page", SEARCH_URL, engine, limit=3)) == 3

    def test_substring_engine(self, sample_bookmarks):
        items = build_items(sample_bookmarks, "docs", SEARCH_URL, SubstringSearchEngine())
        assert items == [Item("Python Docs", "Open in browser →", "https://docs.python.org")]


class TestRenderItems:
    def test_alfred_json(self):
        rendered = render_items([Item("Dashboard", "Open in browser →", "http://www.test.blub")])
        assert json.loads(rendered) == {
            "items": [
                {"title": "Dashboard", "subtitle": "Open in browser →", "arg": "http://www.test.blub"},
            ]
        }

    def test_keeps_unicode(self):
        assert "→" in render_items([Item("A", "Open them →", "http://a")])


class RecordingEngine:
    """Returns every bookmark it is given and remembers the limit it got."""

    def __init__(self):
        self.limits = []

    def search(self, query, bookmarks, limit=10):
        self.limits.append(limit)
        return list(bookmarks)


class TestLimitHandling:
    def test_limit_passed_to_engine(self, sample_bookmarks):
        engine = RecordingEngine()
        build_items(sample_bookmarks, "o", SEARCH_URL, engine, limit=3)
        assert engine.limits == [3]

    def test_engine_results_used_as_ranked(self, sample_bookmarks):
        items = build_items(sample_bookmarks, "o", SEARCH_URL, RecordingEngine(), limit=3)
        assert [item.arg for item in items] == [b.link for b in sample_bookmarks]
