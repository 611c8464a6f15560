"""Exceptions for fatal site synchronization failures."""

from pathlib import Path
from typing import Optional


class SiteSyncError(Exception):
    """
    Base exception for failures that abort a synchronization run.

    Attributes:
        message: Error description
        path: File involved in the failure
        original_error: The underlying exception
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.path = path
        self.original_error = original_error

        parts = [message]

        if path:
            parts.append(f"Path: {path}")

        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))


class SourceReadError(SiteSyncError):
    """Raised when the markdown resume cannot be read."""

    pass


class DocumentReadError(SiteSyncError):
    """Raised when the destination page cannot be read."""

    pass


class DocumentWriteError(SiteSyncError):
    """Raised when the updated page cannot be written."""

    pass
