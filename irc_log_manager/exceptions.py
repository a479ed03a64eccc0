"""
Custom exceptions for IRC log management.

This module defines a hierarchy of exceptions for handling errors
specific to reading the client configuration, mapping transcript files
and validating their records.
"""

from typing import Optional


class LogManagerError(Exception):
    """Base exception for all IRC log manager errors."""

    pass


class ConfigurationError(LogManagerError):
    """Raised for configuration-related errors."""

    pass


class ConfigUnavailableError(ConfigurationError):
    """Raised when the client configuration cannot be read.

    Attributes:
        path: Path of the configuration file.
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.path:
            return f"{base} (file: {self.path})"
        return base


class FileUnavailableError(LogManagerError):
    """Raised when a channel transcript cannot be opened or mapped.

    Attributes:
        path: Path of the transcript file.
        reason: Underlying OS error description (if any).
    """

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f'Failed to read "{path}"')

    def __str__(self) -> str:
        base = super().__str__()
        if self.reason:
            return f"{base}: {self.reason}"
        return base


class UnexpectedFormatError(LogManagerError):
    """Raised when a transcript record has an unexpected format.

    Attributes:
        file_name: Transcript file the record belongs to.
        position: Absolute byte offset of the record in the file.
        line: Offending record text.
    """

    def __init__(self, file_name: str, position: int, line: str) -> None:
        self.file_name = file_name
        self.position = position
        self.line = line
        super().__init__(
            f'File "{file_name}" has an unexpected format in {position}th byte. ("{line}")'
        )


class DecodeFailureError(UnexpectedFormatError):
    """Raised when a record that must be text is not valid UTF-8."""

    pass
