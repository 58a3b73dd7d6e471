"""
Error types for the AAC board.

  ImageNotFound    - selection did not resolve in the current scope
  BoardFileError   - board file could not be read or written
  BoardFormatError - board file is structurally invalid
"""
from typing import Optional


class AACError(Exception):
    """Base class for AAC board errors."""
    pass


class ImageNotFound(AACError, KeyError):
    """Raised when an image is neither a category nor an item in the current category."""

    def __init__(self, image_loc: str, scope: str = ""):
        self.image_loc = image_loc
        self.scope = scope
        where = f" in {scope!r}" if scope else ""
        super().__init__(f"Image not found{where}: {image_loc}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class BoardFileError(AACError):
    """Raised when a board file cannot be read or written."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class BoardFormatError(BoardFileError):
    """Raised for a board file line that cannot be applied."""

    def __init__(self, message: str, path: Optional[str] = None, line_no: Optional[int] = None):
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message, path)
