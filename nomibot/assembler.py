"""Assembly of the final ChatResult from the processed pieces."""

from __future__ import annotations

import re
from typing import Optional

from .extractor import ExtractionResult
from .models import ChatResult
from .renderer import LINE_BREAK_TAG, render_html
from .sanitizer import ANSWER_PREFIX, clean_citations

_EMPTY_PAGE_REFERENCE = re.compile(r"<br\s*/?>\s*Page Reference URL:\s*<br\s*/?>", re.IGNORECASE)
_STRAY_PAGE_REFERENCE = re.compile(
    r"(<br\s*/?>)?\s*(?<!<strong>)Page Reference URL:(?!</strong>)\s*(<br\s*/?>)?",
    re.IGNORECASE,
)


def page_reference_fragment(url: str) -> str:
    return (
        "<br><strong>Page Reference URL:</strong> "
        f"<a href='{url}' target='_blank'>{url}</a>"
    )


def build_plain_text(answer_text: str) -> str:
    return f"{ANSWER_PREFIX} {(answer_text or '').strip()}"


def build_html(answer_text: str, page_reference_url: Optional[str]) -> str:
    html = render_html(clean_citations(answer_text))
    html = _EMPTY_PAGE_REFERENCE.sub(LINE_BREAK_TAG, html)
    if page_reference_url:
        html += page_reference_fragment(page_reference_url)
    return _STRAY_PAGE_REFERENCE.sub("", html)


def assemble(answer_text: str, extraction: ExtractionResult, human_ask: bool) -> ChatResult:
    page_reference_url = extraction.page_reference_url
    if page_reference_url is not None and not page_reference_url.strip():
        page_reference_url = None

    return ChatResult(
        plain_text=build_plain_text(answer_text),
        html=build_html(answer_text, page_reference_url),
        images=list(extraction.image_urls) or None,
        is_human_ask=human_ask,
        page_reference_url=page_reference_url,
    )
