"""
Channel ranking by recent activity of a set of authors.
"""

from typing import Callable, Iterable, List, Optional

from .channels import log_path
from .config import FIRST_MOVABLE_POSITION, LOG_EXTENSION, normalize_date
from .dispatcher import dispatch
from .exceptions import UnexpectedFormatError
from .log_region import LogRegion
from .logging_config import get_logger
from .models import ChannelDescriptor, RankedChannel
from .patterns import RECORD_PATTERN
from .scanner import decode_record, iter_records

logger = get_logger(__name__)


def author_predicate(aliases: Iterable[str]) -> Callable[[str], bool]:
    """Predicate accepting exactly the given author names."""
    names = frozenset(aliases)
    return names.__contains__


def sort_ranked(results: Iterable[RankedChannel]) -> List[RankedChannel]:
    """Most active first; ties keep their current buffer order."""
    return sorted(results, key=lambda r: (-r.count, r.channel.display_index))


def directives(
    ranked: Iterable[RankedChannel], base_position: int = FIRST_MOVABLE_POSITION
) -> List[str]:
    """Client commands that move each buffer to its ranked position."""
    lines = []
    for position, result in enumerate(ranked, start=base_position):
        lines.append(f"/buffer {result.channel.buffer_name}")
        lines.append(f"/buffer move {position}")
    return lines


class ActivityRanker:
    """
    Counts recent qualifying messages per channel.

    Transcripts are read from the newest record backward. Record dates are
    assumed non-decreasing through a file, so the first record older than
    the cutoff ends the scan for that channel.
    """

    def __init__(
        self,
        log_dir: str,
        cutoff_date: str,
        qualifies: Callable[[str], bool],
        extension: str = LOG_EXTENSION,
        max_workers: Optional[int] = None,
    ):
        self.log_dir = log_dir
        self.cutoff_date = normalize_date(cutoff_date)
        self.qualifies = qualifies
        self.extension = extension
        self.max_workers = max_workers

    def count_region(self, region, file_name: str) -> int:
        """
        Count qualifying records at or after the cutoff date.

        Raises:
            UnexpectedFormatError: If a scanned record does not parse.
            DecodeFailureError: If a scanned record is not valid UTF-8.
        """
        count = 0
        stopped_at = len(region)
        for span in iter_records(region, reverse=True):
            stopped_at = span.start
            line = decode_record(region, span, file_name)

            match = RECORD_PATTERN.match(line)
            if match is None:
                raise UnexpectedFormatError(file_name, span.start, line)

            if match.group("date") < self.cutoff_date:
                break

            if self.qualifies(match.group("name")):
                count += 1

        logger.info('Finished processing "%s" at %sth byte', file_name, stopped_at)
        return count

    def count(self, channel: ChannelDescriptor) -> RankedChannel:
        """Score one channel."""
        file_name = channel.file_name(self.extension)
        logger.info('Checking "%s"', file_name)

        with LogRegion.open(log_path(self.log_dir, channel, self.extension)) as region:
            count = self.count_region(region, file_name)

        return RankedChannel(channel=channel, count=count)

    def rank(self, channels: Iterable[ChannelDescriptor]) -> List[RankedChannel]:
        """
        Score every channel in parallel and order them by activity.

        Raises:
            UnexpectedFormatError: The first failure reported by any worker.
            FileUnavailableError: If a transcript cannot be opened.
        """
        results = dispatch(channels, self.count, max_workers=self.max_workers)
        logger.info("Processed %d files", len(results))
        return sort_ranked(results)
