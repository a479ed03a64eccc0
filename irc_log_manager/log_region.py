"""
Read-only byte access to a transcript file.
"""

import numpy as np

from .exceptions import FileUnavailableError
from .logging_config import get_logger

logger = get_logger(__name__)


class LogRegion:
    """The full contents of one transcript as a read-only uint8 array.

    The array is a ``np.memmap`` of the file when it can be mapped; empty
    files and files that cannot be mapped are read into memory instead.
    Scans work on slices of ``array`` in place; ``read`` copies out the
    bytes of a single record.
    """

    def __init__(self, path: str, array: np.ndarray, mapped: bool) -> None:
        self.path = path
        self.array = array
        self.mapped = mapped
        self.closed = False

    @classmethod
    def open(cls, path: str) -> "LogRegion":
        """
        Map a transcript read-only.

        Raises:
            FileUnavailableError: If the file cannot be opened or read.
        """
        try:
            handle = open(path, "rb")
        except OSError as e:
            logger.info('Failed to read "%s"', path)
            raise FileUnavailableError(path, e.strerror) from e

        with handle:
            try:
                return cls(path, np.memmap(handle, dtype=np.uint8, mode="r"), True)
            except (ValueError, OSError) as e:
                logger.debug('Falling back to reading "%s" into memory: %s', path, e)
            try:
                handle.seek(0)
                return cls(path, np.frombuffer(handle.read(), dtype=np.uint8), False)
            except OSError as e:
                logger.info('Failed to read "%s"', path)
                raise FileUnavailableError(path, e.strerror) from e

    def __len__(self) -> int:
        return len(self.array)

    def read(self, start: int, end: int) -> bytes:
        """Copy of the bytes in [start, end)."""
        return self.array[start:end].tobytes()

    def close(self) -> None:
        # The mapping is released once the last view of it is gone
        self.array = np.empty(0, dtype=np.uint8)
        self.closed = True

    def __enter__(self) -> "LogRegion":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
