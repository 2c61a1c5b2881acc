"""Exceptions raised while configuring the filter and loading bookmarks."""


class BookmarkFilterError(Exception):
    """Base class for fatal setup errors."""
    pass


class ConfigError(BookmarkFilterError):
    """A required setting is missing or a setting has an invalid value."""
    pass


class BookmarksFileError(BookmarkFilterError):
    """The bookmarks document could not be read."""
    pass


class ParseError(BookmarkFilterError):
    """The bookmarks document is not valid JSON."""
    pass


class SchemaError(BookmarkFilterError):
    """The bookmarks document does not have the expected shape."""
    pass
