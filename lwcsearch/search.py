import logging
import re
from typing import Any, Iterable, List, Optional, Sequence

from markupsafe import Markup

from .analysis import query_terms
from .ranking import MATCH_ALL_SCORE, ScoredArticle, score_article
from .utils import escape_regex

logger = logging.getLogger(__name__)

MARK_OPEN = "<mark>"
MARK_CLOSE = "</mark>"


def _blank(query: Optional[str]) -> bool:
    return not query or not str(query).strip()


def rank(articles: Optional[Iterable[Any]], query: Optional[str]) -> List[ScoredArticle]:
    """Score and order articles for ``query``; equal scores keep input order."""
    articles = list(articles or [])
    terms = [] if _blank(query) else query_terms(query)
    if not terms:
        return [ScoredArticle(a, MATCH_ALL_SCORE) for a in articles]

    scored = [ScoredArticle(a, score_article(a, terms)) for a in articles]
    hits = [r for r in scored if r.score > 0]
    # sorted() is stable, so ties stay in manifest order
    hits = sorted(hits, key=lambda r: -r.score)
    logger.debug("query %r -> terms %s, %d/%d articles matched",
                 query, terms, len(hits), len(articles))
    return hits


def search(articles: Sequence[Any], query: Optional[str]) -> Sequence[Any]:
    """
    Filter and rank ``articles`` for a raw query string.

    A blank query, or one with no term of at least two characters, returns
    ``articles`` itself untouched.
    """
    if _blank(query):
        return articles
    if not query_terms(query):
        return articles
    return [r.article for r in rank(articles, query)]


def highlight(text: Optional[str], terms: Optional[Iterable[str]]) -> Optional[str]:
    """
    Wrap case-insensitive occurrences of each term in <mark>.

    Terms are applied one after another on the already marked string, so
    overlapping terms produce nested or repeated marks. The source text is
    not escaped.
    """
    terms = list(terms or [])
    if not text or not terms:
        return text

    result = str(text)
    for term in terms:
        if not term:
            continue
        rx = re.compile("(" + escape_regex(term) + ")", re.IGNORECASE)
        result = rx.sub(lambda m: MARK_OPEN + m.group(1) + MARK_CLOSE, result)
    return result


def _terms_regex(terms: Iterable[str]) -> Optional[re.Pattern]:
    words = sorted({str(t) for t in terms if t}, key=lambda w: (-len(w), w))
    if not words:
        return None
    return re.compile("(" + "|".join(escape_regex(w) for w in words) + ")", re.IGNORECASE)


def _mark_escaped(text: str, rx: Optional[re.Pattern]) -> Markup:
    if rx is None:
        return Markup.escape(text)
    out: List[str] = []
    pos = 0
    for m in rx.finditer(text):
        out.append(Markup.escape(text[pos:m.start()]))
        out.append(f"{MARK_OPEN}{Markup.escape(m.group(0))}{MARK_CLOSE}")
        pos = m.end()
    out.append(Markup.escape(text[pos:]))
    return Markup("".join(out))


def highlight_markup(text: Optional[str], terms: Optional[Iterable[str]]) -> Markup:
    """HTML-safe highlight: escapes ``text`` and marks all terms in one pass."""
    if not text:
        return Markup("")
    return _mark_escaped(str(text), _terms_regex(terms or []))


def make_snippet(text: Optional[str], terms: Optional[Iterable[str]], max_len: int = 200) -> Markup:
    txt = str(text or "").strip()
    rx = _terms_regex(terms or [])
    m = rx.search(txt) if rx else None
    if not m:
        snippet = txt[:max_len]
        return Markup.escape(snippet) + ('…' if len(txt) > max_len else '')

    start = max(0, m.start() - max_len // 2)
    end = min(len(txt), start + max_len)
    snippet = _mark_escaped(txt[start:end], rx)
    if start > 0: snippet = Markup('…') + snippet
    if end < len(txt): snippet = snippet + '…'
    return snippet
