"""Minimal markdown-to-HTML rendering for chat widgets.

Only the handful of constructs the support bot emits are handled; anything
else passes through as text.
"""

from __future__ import annotations

import re

LINE_BREAK_TAG = "<br>"

# "\*\*Note\*\*" arrives here as "\\Note\\" once asterisks are stripped.
_EMPHASIS = re.compile(r"\\+([^\\\n]+?)\\+")
_NEWLINES = re.compile(r"\n+")
_BREAK_AFTER_ITEM = re.compile(r"</li>" + re.escape(LINE_BREAK_TAG))
_TRAILING_SPACE = re.compile(r"(?:\\n|\s)+$")


def trim_trailing(html: str) -> str:
    return _TRAILING_SPACE.sub("", html)


def render_html(text: str) -> str:
    html = trim_trailing((text or "").strip())
    html = _EMPHASIS.sub(r"<label>\1</label>", html)
    html = _NEWLINES.sub(LINE_BREAK_TAG, html)
    html = _BREAK_AFTER_ITEM.sub("</li>", html)
    if "<li>" in html:
        html = f"<ol>{html}</ol>"
    return trim_trailing(f"<div>{html}</div>")
