"""Data models shared by the codec, writer and rewriter."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

_SHORT_SRC_CHARS = 48


@dataclass(frozen=True)
class DataImageReference:
    """Result of classifying one ``src`` value."""

    raw_prefix: str
    is_data_image: bool
    image_subtype: Optional[str] = None
    base64_payload: Optional[str] = None
    malformed: bool = False

    def __post_init__(self) -> None:
        if (self.image_subtype is None) != (self.base64_payload is None):
            raise ValueError("image_subtype and base64_payload must be set together")
        if self.is_data_image and self.image_subtype is None:
            raise ValueError("a data image reference needs a subtype and payload")
        if not self.is_data_image and self.image_subtype is not None:
            raise ValueError("only data image references carry a subtype and payload")


@dataclass(frozen=True)
class WrittenFile:
    """A decoded image persisted to disk."""

    file_name: str
    full_path: Path


@dataclass
class SkippedImage:
    """A data image left untouched because conversion failed."""

    src: str
    error: Exception

    @property
    def short_src(self) -> str:
        if len(self.src) <= _SHORT_SRC_CHARS:
            return self.src
        return self.src[:_SHORT_SRC_CHARS] + "..."


@dataclass
class ConversionReport:
    """Output of a conversion pass along with what happened to each image."""

    html: str
    written: List[WrittenFile] = field(default_factory=list)
    skipped: List[SkippedImage] = field(default_factory=list)
    substitutions: int = 0
