"""Small, deterministic post-processing for generated answers.

The model sometimes repeats its answer under several "Answer:" headers, and
step-by-step instructions come back with inconsistent numbering. These
helpers fix both without adding content.
"""

from __future__ import annotations

import re
from typing import Optional

_FIRST_ANSWER = re.compile(r"Answer:\s*(.+?)(?=\nAnswer:|$)", re.DOTALL)
_STEPS_MARKER = re.compile(r"\bSteps\b", re.IGNORECASE)
_NUMBERED_LINE = re.compile(r"^\d+\.\s")
_URL_LINE = re.compile(
    r"(Image URL:\s*)?\[?https?://[^\]\s]+(\.png|\.jpg|\.jpeg|\.gif|\.webp|\.svg)?\]?",
    re.IGNORECASE,
)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def isolate_first_answer(text: Optional[str]) -> str:
    """Return the first "Answer:" block, or the text unchanged if there is none."""
    text = text or ""
    match = _FIRST_ANSWER.search(text)
    if match:
        block = match.group(1).strip()
        if block:
            return block
    return text


def is_image_url_line(line: str) -> bool:
    return bool(_URL_LINE.search(line))


def add_step_numbering(text: Optional[str]) -> Optional[str]:
    """Number the lines that follow a "Steps" heading.

    Lines up to and including the heading are kept verbatim. Afterwards,
    blank lines stay blank, lines that are already numbered or that carry a
    URL are kept, and every other line is numbered from 1 (a leading "-"
    bullet is dropped).
    """
    if not text or not text.strip():
        return text
    if not _STEPS_MARKER.search(text):
        return text

    lines = _LINE_BREAK.split(text)
    start = next((i + 1 for i, line in enumerate(lines) if _STEPS_MARKER.search(line)), -1)
    if start == -1 or start >= len(lines):
        return text

    output = lines[:start]
    step = 1
    for raw_line in lines[start:]:
        line = raw_line.strip()
        if not line:
            output.append("")
        elif _NUMBERED_LINE.match(line) or is_image_url_line(line):
            output.append(line)
        else:
            if line.startswith("-"):
                line = line[1:].lstrip()
            output.append(f"{step}. {line}")
            step += 1

    return "\n".join(output).rstrip()
