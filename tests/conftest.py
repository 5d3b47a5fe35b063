"""
Shared fixtures for the conversion tests.
"""
import base64
from pathlib import Path

import pytest

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """
    An existing, writable directory for decoded images
    """
    target = tmp_path / "out"
    target.mkdir()
    return target


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture
def png_uri(png_bytes: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode("ascii")


@pytest.fixture
def sequential_names():
    """
    Name factory returning img1, img2, ... so outputs are predictable
    """
    counter = {"n": 0}

    def factory() -> str:
        counter["n"] += 1
        return f"img{counter['n']}"

    return factory
