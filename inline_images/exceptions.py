"""Exceptions raised while converting inline data images."""

from __future__ import annotations

from typing import Any, Dict, Optional


class ConversionError(Exception):
    """Base class for every failure of the codec or the writer."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.context: Dict[str, Any] = context or {}


class ParseError(ConversionError):
    """A ``data:image`` URI does not have the ``<type>/<subtype>;base64,<payload>`` shape."""


class DecodeError(ConversionError):
    """Base class for failures turning a reference into bytes."""


class NotADataImageError(DecodeError):
    """Decoding was requested for a reference that is not a data image."""


class InvalidEncodingError(DecodeError):
    """The payload is not valid base64."""


class WriteError(ConversionError):
    """Base class for failures persisting decoded bytes."""


class PathNotWritableError(WriteError):
    """The target directory is missing or not writable."""


class WriteFailedError(WriteError):
    """The write was attempted but the filesystem reported a failure."""
