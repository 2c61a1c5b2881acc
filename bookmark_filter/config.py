"""Configuration for the bookmark filter."""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bookmark_filter.errors import ConfigError
from bookmark_filter.search import DEFAULT_LIMIT, SEARCH_ENGINES

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _require(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise ConfigError(f"{name} not set")
    return value


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _bool_from_env(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Config:
    """Settings read once at startup."""
    bookmarks_file: Path
    default_search_url: str
    matcher: str = "fuzzy"  # "fuzzy" or "substring"
    max_results: int = DEFAULT_LIMIT
    skip_invalid: bool = False  # Skip malformed entries instead of failing the load
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.matcher not in SEARCH_ENGINES:
            choices = ", ".join(sorted(SEARCH_ENGINES))
            raise ConfigError(f"Unknown matcher {self.matcher!r}, expected one of: {choices}")
        if self.max_results < 1:
            raise ConfigError(f"max_results must be at least 1, got {self.max_results}")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"Unknown log level {self.log_level!r}")

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables.

        Raises:
            ConfigError: If ``BOOKMARKS_FILE`` or ``DEFAULT_SEARCH_URL`` is
                missing, or an optional variable has an invalid value
        """
        return cls(
            bookmarks_file=Path(_require("BOOKMARKS_FILE")).expanduser(),
            default_search_url=_require("DEFAULT_SEARCH_URL"),
            matcher=os.environ.get("BOOKMARKS_MATCHER", "fuzzy").strip().lower(),
            max_results=_int_from_env("BOOKMARKS_MAX_RESULTS", DEFAULT_LIMIT),
            skip_invalid=_bool_from_env("BOOKMARKS_SKIP_INVALID", False),
            log_level=os.environ.get("BOOKMARKS_LOG_LEVEL", "WARNING").strip().upper(),
        )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global config instance.

    Returns:
        Config loaded from environment
    """
    global _config

    if _config is None:
        _config = Config.from_env()

    return _config


def reset_config() -> None:
    """Forget the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None
