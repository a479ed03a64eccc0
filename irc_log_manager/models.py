"""
Data classes describing channels, records and scan results.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChannelDescriptor:
    """One IRC channel buffer as listed in the client configuration.

    Attributes:
        server: Server name as configured (original case).
        channel: Channel name without the leading '#'.
        display_index: Current buffer position in the client.
    """

    server: str
    channel: str
    display_index: int

    def file_name(self, extension: str) -> str:
        """Transcript file name for this channel."""
        return f"irc.{self.server.lower()}.#{self.channel.lower()}.{extension}"

    @property
    def buffer_name(self) -> str:
        return f"{self.server}.#{self.channel}"


@dataclass(frozen=True)
class RecordSpan:
    """Byte range of one newline-terminated record.

    ``end`` is the offset of the terminating newline, so the record text is
    ``region.read(start, end)``.
    """

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class CheckResult:
    """Outcome of verifying one transcript with no issue found."""

    channel: ChannelDescriptor
    file_name: str
    records: int  # newline-terminated records scanned
    size: int  # bytes in the transcript


@dataclass(frozen=True)
class RankedChannel:
    """A channel and the number of qualifying recent messages in it."""

    channel: ChannelDescriptor
    count: int
