"""
Writing decoded images to disk.
"""
import os

import pytest

from inline_images import writer
from inline_images.codec import parse_data_uri
from inline_images.exceptions import (
    NotADataImageError,
    PathNotWritableError,
    WriteError,
    WriteFailedError,
)
from inline_images.writer import write_image, write_reference


def test_write_image(out_dir):
    written = write_image(out_dir, "abc", "png", b"\x00\x01")
    assert written.file_name == "abc.png"
    assert written.full_path == out_dir / "abc.png"
    assert written.full_path.read_bytes() == b"\x00\x01"


def test_doubled_separators_are_collapsed(out_dir):
    written = write_image(f"{out_dir}//", "abc", "gif", b"GIF89a")
    assert "//" not in str(written.full_path)
    assert written.full_path == out_dir / "abc.gif"


def test_missing_directory(tmp_path):
    with pytest.raises(PathNotWritableError, match="not writable") as info:
        write_image(tmp_path / "missing", "abc", "png", b"x")
    assert isinstance(info.value, WriteError)


def test_permission_denied(out_dir, monkeypatch):
    monkeypatch.setattr(writer.os, "access", lambda path, mode: False)
    with pytest.raises(PathNotWritableError):
        write_image(out_dir, "abc", "png", b"x")
    assert os.listdir(out_dir) == []


def test_existing_file_is_not_overwritten(out_dir):
    existing = out_dir / "abc.png"
    existing.write_bytes(b"original")
    with pytest.raises(WriteFailedError) as info:
        write_image(out_dir, "abc", "png", b"replacement")
    assert isinstance(info.value.__cause__, FileExistsError)
    assert existing.read_bytes() == b"original"


def test_write_reference_default_name(out_dir):
    written = write_reference(out_dir, parse_data_uri("data:image/jpeg;base64,AAAA"))
    assert written.file_name == "image.jpeg"
    assert written.full_path.read_bytes() == b"\x00\x00\x00"


def test_write_reference_rejects_non_data_images(out_dir):
    with pytest.raises(NotADataImageError):
        write_reference(out_dir, parse_data_uri("/static/logo.png"))
    assert os.listdir(out_dir) == []
