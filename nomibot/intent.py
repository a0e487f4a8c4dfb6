import re
from typing import Optional

_HUMAN_ASK = re.compile(
    r"\b(speak|talk|connect|chat|need|want|ask)\b.*\b(human|agent|person|representative)\b",
    re.IGNORECASE | re.DOTALL,
)


def is_human_ask(question: Optional[str]) -> bool:
    """True when the question asks to be handed over to a person."""
    return bool(question) and bool(_HUMAN_ASK.search(question))
