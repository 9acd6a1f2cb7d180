import re

_SPECIAL = set(".*+?^${}()|[]\\")


def escape_regex(text: str) -> str:
    if not text:
        return ""
    return ''.join('\\' + c if c in _SPECIAL else c for c in str(text))


def word_start_regex(term: str) -> re.Pattern:
    # \b is ASCII-only, same as the word class used by normalize()
    return re.compile(r"\b" + escape_regex(term), re.ASCII)
