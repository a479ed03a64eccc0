"""
IRC Log Manager

Checks the integrity of WeeChat IRC transcripts and orders channel buffers
by how recently and how often a set of authors spoke in them.
"""

from .channels import log_path, parse_channels, read_channels
from .checker import IntegrityChecker
from .dispatcher import dispatch
from .exceptions import (
    ConfigUnavailableError,
    ConfigurationError,
    DecodeFailureError,
    FileUnavailableError,
    LogManagerError,
    UnexpectedFormatError,
)
from .log_region import LogRegion
from .models import ChannelDescriptor, CheckResult, RankedChannel, RecordSpan
from .patterns import (
    BUFFER_PATTERN,
    FOOTER_WIDTH,
    RECORD_PATTERN,
    TRUNCATED_RECORD_PATTERN,
)
from .ranker import ActivityRanker, author_predicate, directives, sort_ranked
from .scanner import iter_records, newline_offsets

__all__ = [
    # Commands
    "IntegrityChecker",
    "ActivityRanker",
    "author_predicate",
    "directives",
    "sort_ranked",
    # Channels
    "read_channels",
    "parse_channels",
    "log_path",
    # Scanning
    "LogRegion",
    "iter_records",
    "newline_offsets",
    "dispatch",
    # Data classes
    "ChannelDescriptor",
    "RecordSpan",
    "CheckResult",
    "RankedChannel",
    # Exceptions
    "LogManagerError",
    "ConfigurationError",
    "ConfigUnavailableError",
    "FileUnavailableError",
    "UnexpectedFormatError",
    "DecodeFailureError",
    # Patterns
    "BUFFER_PATTERN",
    "RECORD_PATTERN",
    "TRUNCATED_RECORD_PATTERN",
    "FOOTER_WIDTH",
]

__version__ = "0.1.0"
