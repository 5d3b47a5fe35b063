"""Rewrite HTML so inline data images point at files written to disk."""

from __future__ import annotations

import logging
import re
from typing import Dict, Optional, Set

from bs4 import BeautifulSoup

from .codec import decode_payload, parse_data_uri
from .config import DEFAULT_PARSER, ConvertConfig, ErrorObserver, PathLike
from .exceptions import ConversionError
from .models import ConversionReport, SkippedImage
from .utils import ensure_trailing_slash, slugify, unique_name
from .writer import write_image

logger = logging.getLogger("inline_images")


def _next_base_name(config: ConvertConfig) -> str:
    name = config.name_factory()
    if config.name_prefix:
        name = f"{slugify(config.name_prefix)}-{name}"
    return name


def _src_attribute_pattern(src: str) -> re.Pattern[str]:
    """Match ``src=`` whose whole value is ``src``, quoted or bare."""
    value = re.escape(src)
    return re.compile(
        r"(?P<attr>(?<![\w-])(?i:src)\s*=\s*)"
        r"(?:(?P<quote>[\"'])" + value + r"(?P=quote)|" + value + r"(?=[\s>]|\Z))"
    )


def _quoted(match: re.Match[str], new_src: str) -> str:
    quote = match.group("quote") or ""
    return f"{match.group('attr')}{quote}{new_src}{quote}"


def _skip(
    report: ConversionReport,
    config: ConvertConfig,
    src: str,
    exc: ConversionError,
) -> None:
    skipped = SkippedImage(src=src, error=exc)
    logger.warning("Skipping data image %s: %s", skipped.short_src, exc)
    report.skipped.append(skipped)
    if config.on_error is not None:
        config.on_error(src, exc)


def convert_document(html: str, config: ConvertConfig) -> ConversionReport:
    """Extract every inline data image in ``html`` and report what happened.

    Images are processed in document order. A failure on one image leaves that
    image untouched and moves on to the next.
    """
    disk_path = ensure_trailing_slash(config.disk_path)
    url_path = ensure_trailing_slash(config.url_path)

    soup = BeautifulSoup(html, config.parser)
    report = ConversionReport(html=html)
    converted: Dict[str, str] = {}
    failed: Set[str] = set()
    serialize = config.output == "serialize"

    for img in soup.find_all("img"):
        src = img.get("src")
        if not src or src in failed:
            continue
        if src in converted:
            img["src"] = converted[src]
            continue

        try:
            ref = parse_data_uri(src, strict=True)
            if not ref.is_data_image:
                continue
            written = write_image(
                disk_path,
                _next_base_name(config),
                ref.image_subtype,
                decode_payload(ref),
            )
        except ConversionError as exc:
            failed.add(src)
            _skip(report, config, src, exc)
            continue

        new_src = url_path + written.file_name
        img["src"] = new_src
        converted[src] = new_src
        report.written.append(written)
        report.substitutions += 1

        if not serialize:
            patched, count = _src_attribute_pattern(src).subn(
                lambda match: _quoted(match, new_src), report.html
            )
            if count:
                report.html = patched
            else:
                logger.warning(
                    "Source text of %s not found verbatim; serializing the parsed document",
                    written.full_path,
                )
                serialize = True

    if serialize and report.written:
        report.html = str(soup)
    logger.debug(
        "Converted %d data image(s), skipped %d",
        len(report.written),
        len(report.skipped),
    )
    return report


def convert_data_uris(
    html: str,
    disk_path: PathLike,
    url_path: str,
    *,
    parser: str = DEFAULT_PARSER,
    output: str = "patch",
    name_prefix: Optional[str] = None,
    on_error: Optional[ErrorObserver] = None,
) -> str:
    """Write inline data images to ``disk_path`` and return the rewritten HTML.

    Each converted ``src`` becomes ``url_path`` followed by the generated file
    name. Images that cannot be decoded or written are left as they were.
    """
    config = ConvertConfig(
        disk_path=disk_path,
        url_path=url_path,
        parser=parser,
        output=output,
        name_prefix=name_prefix,
        name_factory=unique_name,
        on_error=on_error,
    )
    return convert_document(html, config).html
