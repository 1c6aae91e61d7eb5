"""Custom exceptions for ATLAS document handling."""

from pathlib import Path
from typing import Optional


class UnreadableDocumentError(Exception):
    """
    Exception raised when a document cannot be read as plain text.

    The scoring core only ever sees decoded text. Anything that fails before
    that point (missing file, binary content, bad encoding) is reported with
    this exception so callers can tell it apart from a low score.

    Attributes:
        message: Error description
        path: Path of the document that failed to load
        original_error: The underlying OS or decode error
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
            parts.append(f"\nDocument: {path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidStructureError(ValueError):
    """
    Exception raised when stored structured data is missing required fields.

    Raised by from_dict() factories and by the taxonomy loader when a
    mapping does not have the expected shape.
    """

    pass
