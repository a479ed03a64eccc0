"""
Configuration defaults and settings resolution.

The client keeps its own configuration and transcripts under a single
directory (``~/.weechat`` unless ``WEECHAT_HOME`` says otherwise). These
settings describe where to find them and how the commands behave; the
command line can override each of them.
"""

import os
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from .exceptions import ConfigurationError
from .patterns import ISO_DATE_PATTERN

# Where the client lives when neither --weechat-dir nor WEECHAT_HOME is given
DEFAULT_WEECHAT_DIR = "~/.weechat"
WEECHAT_HOME_ENV = "WEECHAT_HOME"

CONFIG_FILE_NAME = "weechat.conf"
LOG_SUBDIR = "logs"
LOG_EXTENSION = "weechatlog"

# Messages older than this many days do not count toward channel activity
DEFAULT_ACTIVITY_WINDOW_DAYS = 30

# Nicks of the log owner
DEFAULT_QUALIFYING_AUTHORS = ("김젼", "김지현", "지현", "지현_")

# Positions 0 and 1 hold the core and server buffers
FIRST_MOVABLE_POSITION = 2


@dataclass(frozen=True)
class Settings:
    """Resolved locations of the client configuration and transcripts."""

    weechat_dir: str
    log_extension: str = LOG_EXTENSION
    max_workers: Optional[int] = None

    @property
    def config_path(self) -> str:
        return os.path.join(self.weechat_dir, CONFIG_FILE_NAME)

    @property
    def log_dir(self) -> str:
        return os.path.join(self.weechat_dir, LOG_SUBDIR)


def resolve_weechat_dir(explicit: Optional[str] = None) -> str:
    """
    Find the client directory.

    Args:
        explicit: Directory given on the command line, if any.

    Returns:
        Absolute path of the client directory.

    Raises:
        ConfigurationError: If the home directory cannot be determined.
    """
    candidate = explicit or os.environ.get(WEECHAT_HOME_ENV) or DEFAULT_WEECHAT_DIR
    expanded = os.path.expanduser(candidate)
    if expanded.startswith("~"):
        raise ConfigurationError(f"Cannot resolve home directory in {candidate!r}")
    return os.path.abspath(expanded)


def load_settings(
    weechat_dir: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> Settings:
    """Build Settings from command line values and the environment."""
    if max_workers is not None and max_workers < 1:
        raise ConfigurationError(f"Worker count must be positive, got {max_workers}")
    return Settings(weechat_dir=resolve_weechat_dir(weechat_dir), max_workers=max_workers)


def normalize_date(value: str) -> str:
    """
    Validate an ISO 8601 calendar date and return it as YYYY-MM-DD.

    Cutoff dates are compared to record dates as strings, which only
    orders chronologically for fixed-width ISO dates.

    Raises:
        ConfigurationError: If the value is not a valid YYYY-MM-DD date.
    """
    if not ISO_DATE_PATTERN.match(value):
        raise ConfigurationError(f"Expected a YYYY-MM-DD date, got {value!r}")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date().isoformat()
    except ValueError as e:
        raise ConfigurationError(f"Invalid date {value!r}: {e}") from e


def default_cutoff_date(today: Optional[date] = None) -> str:
    """Earliest date counted when no --since is given."""
    today = today or date.today()
    return (today - timedelta(days=DEFAULT_ACTIVITY_WINDOW_DAYS)).isoformat()
