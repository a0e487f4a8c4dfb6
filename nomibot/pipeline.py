"""Raw model answer -> ChatResult.

URLs are extracted from the untouched answer before the sanitizer removes
anything from it.
"""

from __future__ import annotations

from .assembler import assemble
from .extractor import extract
from .intent import is_human_ask
from .models import ChatResult
from .postprocess import isolate_first_answer
from .sanitizer import sanitize


def answer(question: str, raw_answer: str) -> ChatResult:
    raw_answer = (raw_answer or "").strip()
    extraction = extract(raw_answer)
    cleaned = sanitize(raw_answer)
    isolated = isolate_first_answer(cleaned)
    return assemble(isolated, extraction, human_ask=is_human_ask(question))
