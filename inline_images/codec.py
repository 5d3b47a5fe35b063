"""Classification and decoding of ``data:image`` URIs."""

from __future__ import annotations

import base64
import binascii
import logging
import re

from .config import DATA_IMAGE_MARKER, PREFIX_LENGTH
from .exceptions import InvalidEncodingError, NotADataImageError, ParseError
from .models import DataImageReference

logger = logging.getLogger("inline_images.codec")

# data:image/<subtype>[;param=value...];base64,<payload>
DATA_URI_PATTERN = re.compile(
    r"\A\s*data:image/(?P<subtype>[A-Za-z0-9][A-Za-z0-9.+-]*)"
    r"(?:;[^;,]*)*?;(?i:base64),(?P<payload>.*)\Z",
    re.DOTALL,
)
WHITESPACE_PATTERN = re.compile(r"\s+")


def parse_data_uri(src: str, strict: bool = False) -> DataImageReference:
    """Classify ``src`` and split out the image subtype and base64 payload.

    Only the first ``PREFIX_LENGTH`` characters decide whether ``src`` is meant
    to be a data image. A string that passes that check but does not match
    the full data URI shape is returned as ``malformed``, or raises
    :class:`ParseError` when ``strict`` is set.
    """
    prefix = src[:PREFIX_LENGTH]
    if DATA_IMAGE_MARKER not in prefix:
        return DataImageReference(raw_prefix=prefix, is_data_image=False)

    match = DATA_URI_PATTERN.match(src)
    if not match:
        if strict:
            raise ParseError(
                "Malformed data image URI; expected data:image/<subtype>;base64,<payload>",
                context={"prefix": prefix},
            )
        logger.debug("Malformed data image URI starting with %r", prefix)
        return DataImageReference(raw_prefix=prefix, is_data_image=False, malformed=True)

    return DataImageReference(
        raw_prefix=prefix,
        is_data_image=True,
        image_subtype=match.group("subtype"),
        base64_payload=match.group("payload"),
    )


def is_data_image(ref: DataImageReference) -> bool:
    return ref.is_data_image


def decode_payload(ref: DataImageReference) -> bytes:
    """Return the binary image held by ``ref``."""
    if not ref.is_data_image or ref.base64_payload is None:
        raise NotADataImageError(
            "The reference is not a data image", context={"prefix": ref.raw_prefix}
        )
    payload = WHITESPACE_PATTERN.sub("", ref.base64_payload)
    if not payload:
        raise InvalidEncodingError(
            "The data image has an empty payload", context={"prefix": ref.raw_prefix}
        )
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise InvalidEncodingError(
            f"The data image payload is not valid base64: {exc}",
            context={"prefix": ref.raw_prefix},
        ) from exc
