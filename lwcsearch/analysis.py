import re
from typing import List, Optional

# Word characters follow the ASCII class [A-Za-z0-9_].
_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)
_SPACE_RE = re.compile(r"\s+")

MIN_TERM_LENGTH = 2


def normalize(text: Optional[str]) -> str:
    """Lowercase, turn punctuation into spaces, collapse whitespace."""
    if not text:
        return ""
    t = str(text).lower()
    t = _NON_WORD_RE.sub(" ", t)
    return _SPACE_RE.sub(" ", t).strip()


def query_terms(query: Optional[str]) -> List[str]:
    return [t for t in normalize(query).split(" ") if len(t) >= MIN_TERM_LENGTH]
