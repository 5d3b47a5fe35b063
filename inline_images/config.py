"""Configuration objects and constants for data URI conversion."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from .utils import unique_name

PREFIX_LENGTH = 14
DATA_IMAGE_MARKER = "data:image"
DEFAULT_PARSER = "html.parser"
OUTPUT_MODES = ("patch", "serialize")

PathLike = Union[str, "os.PathLike[str]"]
ErrorObserver = Callable[[str, Exception], None]


@dataclass
class ConvertConfig:
    """Settings that control a single HTML conversion pass."""

    disk_path: PathLike
    url_path: str
    parser: str = DEFAULT_PARSER
    output: str = "patch"
    name_prefix: Optional[str] = None
    name_factory: Callable[[], str] = field(default=unique_name)
    on_error: Optional[ErrorObserver] = None

    def __post_init__(self) -> None:
        if self.output not in OUTPUT_MODES:
            raise ValueError(
                f"output must be one of {', '.join(OUTPUT_MODES)}, got {self.output!r}"
            )
