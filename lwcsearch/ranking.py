from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .analysis import normalize
from .articles import get_field, tag_text
from .utils import word_start_regex

TITLE_WEIGHT = 10
DESC_WEIGHT = 5
TAG_WEIGHT = 3
TITLE_WORD_START_BONUS = 3
DESC_WORD_START_BONUS = 2

# score returned when there are no terms: everything matches
MATCH_ALL_SCORE = 1


@dataclass(frozen=True)
class ScoredArticle:
    article: Any
    score: int


def score_article(article: Any, query_terms: Optional[Iterable[str]]) -> int:
    """
    Relevance of one article for already normalized query terms.

    Per term:
      title substring        +10
      description substring  +5
      tags substring          +3 (tags joined by a space, not normalized)
      word start in title     +3
      word start in desc      +2

    0 means no match at all. An empty term list scores MATCH_ALL_SCORE.
    """
    terms = list(query_terms or [])
    if not terms:
        return MATCH_ALL_SCORE

    title = normalize(get_field(article, "title", ""))
    desc = normalize(get_field(article, "desc", ""))
    tags = tag_text(get_field(article, "tags"))

    score = 0
    for term in terms:
        if not term:
            continue
        term = str(term)
        if term in title: score += TITLE_WEIGHT
        if term in desc: score += DESC_WEIGHT
        if term in tags: score += TAG_WEIGHT

        rx = word_start_regex(term)
        if rx.search(title): score += TITLE_WORD_START_BONUS
        if rx.search(desc): score += DESC_WORD_START_BONUS
    return score
