"""
Channel discovery from the client configuration.
"""

import os
from typing import Iterable, List, Optional

from .exceptions import ConfigUnavailableError
from .logging_config import get_logger
from .models import ChannelDescriptor
from .patterns import BUFFER_PATTERN

logger = get_logger(__name__)

# Buffer positions are unsigned 32-bit integers in the client
MAX_DISPLAY_INDEX = 2**32 - 1


def parse_display_index(raw: str) -> Optional[int]:
    """Parse a buffer position, returning None if it is out of range."""
    index = int(raw)
    if index > MAX_DISPLAY_INDEX:
        return None
    return index


def parse_channels(lines: Iterable[str]) -> List[ChannelDescriptor]:
    """
    Extract IRC channel buffers from configuration lines.

    Lines that do not describe an IRC channel buffer are skipped, and so are
    buffers whose position cannot be parsed.

    Args:
        lines: Configuration file lines (with or without trailing newlines).

    Returns:
        Channel descriptors in configuration order.
    """
    channels = []
    for line in lines:
        match = BUFFER_PATTERN.match(line.rstrip("\r\n"))
        if not match:
            continue

        server, channel, raw_index = match.groups()
        index = parse_display_index(raw_index)
        if index is None:
            logger.debug('Skipping channel "%s" with invalid index %s', channel, raw_index)
            continue

        logger.info('Found channel "%s"', channel)
        channels.append(ChannelDescriptor(server=server, channel=channel, display_index=index))

    return channels


def read_channels(config_path: str) -> List[ChannelDescriptor]:
    """
    Read the channel list from the client configuration file.

    Raises:
        ConfigUnavailableError: If the file is missing or unreadable.
    """
    try:
        with open(config_path, encoding="utf-8") as f:
            channels = parse_channels(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigUnavailableError(
            f"Cannot read client configuration: {e}", path=config_path
        ) from e

    logger.info("Found %d channels", len(channels))
    return channels


def log_path(log_dir: str, channel: ChannelDescriptor, extension: str) -> str:
    """Full path of a channel's transcript."""
    return os.path.join(log_dir, channel.file_name(extension))
