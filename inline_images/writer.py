"""Persist decoded image bytes under generated names."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .codec import decode_payload
from .config import PathLike
from .exceptions import PathNotWritableError, WriteFailedError
from .models import DataImageReference, WrittenFile
from .utils import normalize_dir

logger = logging.getLogger("inline_images.writer")


def _is_writable_dir(directory: str) -> bool:
    return os.path.isdir(directory) and os.access(directory, os.W_OK)


def write_image(
    directory: PathLike,
    base_name: str,
    subtype: str,
    data: bytes,
) -> WrittenFile:
    """Write ``data`` to ``<directory>/<base_name>.<subtype>``.

    The directory must already exist and be writable. Existing files are never
    overwritten; a name clash surfaces as :class:`WriteFailedError`.
    """
    target_dir = normalize_dir(directory)
    if not _is_writable_dir(target_dir):
        raise PathNotWritableError(
            f"The path ({target_dir}) is not writable. This is most likely a permissions issue.",
            context={"path": target_dir},
        )

    file_name = f"{base_name}.{subtype}"
    destination = Path(target_dir + file_name)
    try:
        with destination.open("xb") as handle:
            handle.write(data)
    except OSError as exc:
        raise WriteFailedError(
            f"Failed to write image {destination}: {exc}",
            context={"path": str(destination)},
        ) from exc

    logger.debug("Wrote %d bytes to %s", len(data), destination)
    return WrittenFile(file_name=file_name, full_path=destination)


def write_reference(
    directory: PathLike,
    ref: DataImageReference,
    base_name: str = "image",
) -> WrittenFile:
    """Decode ``ref`` and write it with :func:`write_image`.

    Raises :class:`NotADataImageError` from :func:`decode_payload` when ``ref``
    is not a data image.
    """
    data = decode_payload(ref)
    return write_image(directory, base_name, ref.image_subtype, data)
