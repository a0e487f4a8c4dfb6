"""Page reference and image URL extraction from raw model answers.

Models format their sources inconsistently: markdown images, markdown links,
"Image URL:" lines and bare ``[https://...]`` tokens all show up, sometimes
for the same URL. Every scan runs on the untouched raw answer and the results
are merged in a fixed order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import urlsplit

from .patterns import IMAGE_EXTENSION_RE, IMAGE_SOURCES, PAGE_REFERENCE

_ILLEGAL_URL_CHARS = frozenset('<>"{}|\\^`')
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True)
class ExtractionResult:
    page_reference_url: Optional[str]
    image_urls: tuple[str, ...] = ()


def is_well_formed_url(candidate: str) -> bool:
    """Return True for absolute http(s) URLs that need no further escaping."""
    if not candidate:
        return False
    if any(ch.isspace() or ch in _ILLEGAL_URL_CHARS for ch in candidate):
        return False
    if _BAD_PERCENT_ESCAPE.search(candidate):
        return False
    try:
        parts = urlsplit(candidate)
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return False
    return parts.scheme.lower() in {"http", "https"} and bool(parts.hostname)


def is_image_url(url: str) -> bool:
    if IMAGE_EXTENSION_RE.search(url):
        return True
    try:
        path = urlsplit(url).path
    except ValueError:
        return False
    return bool(IMAGE_EXTENSION_RE.search(path))


def dedupe_casefold(urls: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for url in urls:
        key = url.casefold()
        if key in seen:
            continue
        seen.add(key)
        unique.append(url)
    return unique


def extract_page_reference(text: str) -> Optional[str]:
    """Return the first non-image "Page Reference URL:" candidate, if any."""
    candidates: list[str] = []
    for url in PAGE_REFERENCE.find_urls(text or ""):
        url = url.strip()
        if not url or is_image_url(url) or url in candidates:
            continue
        candidates.append(url)
    return candidates[0] if candidates else None


def extract_image_urls(text: str) -> list[str]:
    collected: list[str] = []
    for source in IMAGE_SOURCES:
        collected.extend(url for url in source.find_urls(text or "") if is_well_formed_url(url))
    return dedupe_casefold(collected)


def extract(text: str) -> ExtractionResult:
    return ExtractionResult(
        page_reference_url=extract_page_reference(text),
        image_urls=tuple(extract_image_urls(text)),
    )
