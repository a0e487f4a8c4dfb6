"""Shared pattern table for the labeled fields the model emits.

Each entry pairs the pattern used to *capture* a URL with the pattern(s) used
to *remove* the same segment from the answer text. The extractor reads the
capture side, the sanitizer reads the removal side, so a shape that can be
extracted can always be stripped as well.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

# URL bodies, differing only in which characters terminate them.
MARKDOWN_URL = r"https?://[^\s)]+"
BRACKET_URL = r"https?://[^\s\]]+"
PAGE_REFERENCE_URL = r"https?://[^\s)\]<>\"']+"
LABELED_URL = r"https?://\S+"
CONTENT_FROM_URL = r"https?://[^\s<]+"

IMAGE_EXTENSIONS = ("png", "jpg", "jpeg", "svg", "gif", "webp")
IMAGE_EXTENSION_RE = re.compile(r"\.(?:%s)$" % "|".join(IMAGE_EXTENSIONS), re.IGNORECASE)


def _compile(pattern: str, flags: int = 0) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE | flags)


@dataclass(frozen=True)
class LabeledField:
    """A URL-bearing shape in the model output.

    Attributes:
        name: Identifier used in logs and tests
        capture: Pattern whose first group is the URL, or None if the shape
            is only ever removed
        removals: Patterns deleted from the answer text, applied in order
    """

    name: str
    capture: Optional[re.Pattern] = None
    removals: tuple[re.Pattern, ...] = field(default_factory=tuple)

    def find_urls(self, text: str) -> list[str]:
        if self.capture is None or not text:
            return []
        return [match.group(1) for match in self.capture.finditer(text)]

    def remove(self, text: str) -> str:
        for pattern in self.removals:
            text = pattern.sub("", text)
        return text


MARKDOWN_IMAGE = LabeledField(
    name="markdown_image",
    capture=_compile(r"!\[.*?\]\((%s)\)" % MARKDOWN_URL),
    removals=(_compile(r"!\[.*?\]\(%s\)" % MARKDOWN_URL),),
)

# Links stay in the answer body; only their URL is collected.
MARKDOWN_LINK = LabeledField(
    name="markdown_link",
    capture=_compile(r"\[.*?\]\((%s)\)" % MARKDOWN_URL),
)

IMAGE_URL = LabeledField(
    name="image_url",
    capture=_compile(r"Image URL:\s*(?:-\s*)?(%s)" % LABELED_URL),
    removals=(
        _compile(r"Image URL:\s*(?:-\s*)?%s" % LABELED_URL),
        _compile(r"Image URL:\s*"),
    ),
)

BRACKETED_URL = LabeledField(
    name="bracketed_url",
    capture=_compile(r"\[(%s)\]" % BRACKET_URL),
    removals=(_compile(r"\[%s\]" % BRACKET_URL),),
)

PAGE_REFERENCE = LabeledField(
    name="page_reference",
    capture=_compile(r"Page Reference URL:[\s\S]*?-\s*(%s)" % PAGE_REFERENCE_URL),
    removals=(
        _compile(r"Page Reference URL:\s*(?:-\s*)?\[.*?\]\(%s\)" % MARKDOWN_URL),
        _compile(r"Page Reference URL:\s*(?:-\s*)?%s" % MARKDOWN_URL),
    ),
)

CONTENT_FROM = LabeledField(
    name="content_from",
    removals=(
        _compile(
            r"Page Reference URL:\s*(?:<br\s*/?>|</br>?)?\s*Content from:\s*%s"
            % CONTENT_FROM_URL
        ),
        _compile(r"Content from:\s*%s" % CONTENT_FROM_URL),
    ),
)

DANGLING_PAGE_REFERENCE = LabeledField(
    name="dangling_page_reference",
    removals=(_compile(r"Page Reference URL:[ \t]*(?:-[ \t]*$)?", re.MULTILINE),),
)

# Order in which image URLs are collected.
IMAGE_SOURCES: tuple[LabeledField, ...] = (
    MARKDOWN_IMAGE,
    MARKDOWN_LINK,
    IMAGE_URL,
    BRACKETED_URL,
)
