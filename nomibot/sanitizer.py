"""Removal of model scaffolding from answer text.

Two stage lists live here. ``SANITIZE_STAGES`` strips the labeled URL
segments and annotations that are returned separately from the answer body.
``CITATION_CLEANING_STAGES`` prepares the isolated answer for HTML rendering.

Both runners repeat their stages until the text no longer changes. Every
stage deletes or shortens text, so the loop always ends, and running a
sanitizer on its own output is a no-op.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .patterns import (
    BRACKETED_URL,
    CONTENT_FROM,
    DANGLING_PAGE_REFERENCE,
    IMAGE_URL,
    MARKDOWN_IMAGE,
    PAGE_REFERENCE,
    LabeledField,
)

ANSWER_PREFIX = "NomiBot: Answer:"


@dataclass(frozen=True)
class Stage:
    name: str
    apply: Callable[[str], str]


def regex_stage(name: str, pattern: str, replacement: str = "", flags: int = 0) -> Stage:
    compiled = re.compile(pattern, flags)
    return Stage(name, lambda text: compiled.sub(replacement, text))


def field_stage(labeled: LabeledField) -> Stage:
    return Stage(labeled.name, labeled.remove)


def _strip_answer_prefix(text: str) -> str:
    return text.replace(ANSWER_PREFIX, "").strip()


SANITIZE_STAGES: tuple[Stage, ...] = (
    field_stage(MARKDOWN_IMAGE),
    field_stage(BRACKETED_URL),
    field_stage(IMAGE_URL),
    field_stage(PAGE_REFERENCE),
    regex_stage(
        "not_available",
        r"(<br\s*/?>)?[ \t]*\b(?:N/A|Not[ \t]*available)\b\.?",
        flags=re.IGNORECASE,
    ),
    field_stage(CONTENT_FROM),
    field_stage(DANGLING_PAGE_REFERENCE),
    regex_stage("empty_bullets", r"^[ \t]*-[ \t]*(?:\n|$)", flags=re.MULTILINE),
)

# Every "*" goes, including ones that are not emphasis markers.
CITATION_CLEANING_STAGES: tuple[Stage, ...] = (
    regex_stage("doc_markers", r"\[doc\d+\]", flags=re.IGNORECASE),
    Stage("answer_prefix", _strip_answer_prefix),
    regex_stage("headings", r"^#{1,6}\s*", flags=re.MULTILINE),
    regex_stage("line_endings", r"\r\n?", "\n"),
    regex_stage("blank_runs", r"\n{3,}", "\n\n"),
    Stage("emphasis", lambda text: text.replace("*", "")),
    regex_stage("space_runs", r"[ \t]{2,}", " "),
    regex_stage("bullets", r"^[ \t]*-[ \t]+", flags=re.MULTILINE),
)


def run_stages(text: Optional[str], stages: Sequence[Stage]) -> str:
    """Apply ``stages`` in order, repeating until the text is stable."""
    current = text or ""
    while True:
        updated = current
        for stage in stages:
            updated = stage.apply(updated)
        if updated == current:
            return updated
        current = updated


def sanitize(text: Optional[str]) -> str:
    return run_stages(text, SANITIZE_STAGES)


def clean_citations(text: Optional[str]) -> str:
    return run_stages(text, CITATION_CLEANING_STAGES)
