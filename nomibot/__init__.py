"""
NomiBot answer service.

Turns raw retrieval-augmented model answers into chat-ready results: plain
text, minimal HTML, image URLs, a page reference link and a human-handover
flag.
"""

__version__ = "1.0.0"

from .config import ChatConfig
from .extractor import ExtractionResult, extract, extract_image_urls, extract_page_reference
from .intent import is_human_ask
from .models import AskRequest, AskResponse, ChatResult
from .pipeline import answer
from .postprocess import add_step_numbering, isolate_first_answer
from .renderer import render_html
from .sanitizer import clean_citations, sanitize
from .service import ChatService

__all__ = [
    "__version__",
    "ChatConfig",
    "ExtractionResult",
    "extract",
    "extract_image_urls",
    "extract_page_reference",
    "is_human_ask",
    "AskRequest",
    "AskResponse",
    "ChatResult",
    "answer",
    "add_step_numbering",
    "isolate_first_answer",
    "render_html",
    "clean_citations",
    "sanitize",
    "ChatService",
]
