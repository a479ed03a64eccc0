"""
Transcript integrity verification.

A record made of a timestamp and a field separator with nothing after it is
what the client leaves behind when it is killed in the middle of a write.
The checker looks for that shape only; other content is not parsed, so
transcripts with non-UTF-8 text elsewhere still pass.
"""

from typing import Iterable, Optional

from .channels import log_path
from .config import LOG_EXTENSION
from .dispatcher import dispatch
from .exceptions import UnexpectedFormatError
from .log_region import LogRegion
from .logging_config import get_logger
from .models import ChannelDescriptor, CheckResult
from .patterns import TRUNCATED_RECORD_PATTERN
from .scanner import footer_window, iter_records

logger = get_logger(__name__)


class IntegrityChecker:
    """Detects truncated records in channel transcripts."""

    def __init__(
        self,
        log_dir: str,
        extension: str = LOG_EXTENSION,
        max_workers: Optional[int] = None,
    ):
        self.log_dir = log_dir
        self.extension = extension
        self.max_workers = max_workers

    def verify_region(self, region, file_name: str) -> int:
        """
        Forward-scan one region for truncated records.

        Returns:
            Number of newline-terminated records scanned.

        Raises:
            UnexpectedFormatError: At the first truncated record, positioned
                at its newline byte.
        """
        records = 0
        for span in iter_records(region):
            records += 1
            window = footer_window(region, span)
            if window is None or not TRUNCATED_RECORD_PATTERN.match(window):
                continue

            logger.info(
                'Found unexpected format in the %dth byte of file "%s"', span.end, file_name
            )
            raise UnexpectedFormatError(file_name, span.end, window[:-1].decode("ascii"))

        return records

    def verify(self, channel: ChannelDescriptor) -> CheckResult:
        """Check one channel's transcript."""
        file_name = channel.file_name(self.extension)
        logger.info("Checking #%s of %s", channel.channel, channel.server)

        with LogRegion.open(log_path(self.log_dir, channel, self.extension)) as region:
            records = self.verify_region(region, file_name)
            size = len(region)

        logger.info('Finished checking "%s"', file_name)
        return CheckResult(channel=channel, file_name=file_name, records=records, size=size)

    def check(self, channels: Iterable[ChannelDescriptor]) -> int:
        """
        Check every channel in parallel.

        Returns:
            Number of transcripts verified.

        Raises:
            UnexpectedFormatError: The first failure reported by any worker.
            FileUnavailableError: If a transcript cannot be opened.
        """
        results = dispatch(channels, self.verify, max_workers=self.max_workers)
        logger.debug(
            "Scanned %d records in %d bytes",
            sum(r.records for r in results),
            sum(r.size for r in results),
        )
        return len(results)
