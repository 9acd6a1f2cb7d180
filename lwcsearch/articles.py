from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)


class ManifestError(ValueError):
    """Raised when an article manifest cannot be read or is not a JSON list."""


@dataclass
class Article:
    title: str
    desc: str = ""
    tags: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping) -> "Article":
        extra = {k: v for k, v in data.items() if k not in ("title", "desc", "tags")}
        return cls(
            title=str(data.get("title") or ""),
            desc=str(data.get("desc") or ""),
            tags=[str(t) for t in tag_list(data.get("tags")) if t is not None],
            extra=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.extra)
        out.update(title=self.title, desc=self.desc, tags=list(self.tags))
        return out


def get_field(article: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a mapping or an object; anything else yields ``default``."""
    if article is None:
        return default
    if isinstance(article, Mapping):
        value = article.get(name, default)
    else:
        value = getattr(article, name, default)
        # methods such as str.title are not fields
        if callable(value):
            return default
    return default if value is None else value


def tag_list(tags: Any) -> List[Any]:
    if not tags:
        return []
    if isinstance(tags, str):
        return [tags]
    try:
        return list(tags)
    except TypeError:
        return [tags]


def tag_text(tags: Any) -> str:
    """Tags joined by a single space; None tags render as empty strings."""
    return " ".join("" if t is None else str(t) for t in tag_list(tags))


def load_manifest(path: Union[str, Path]) -> List[Article]:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise
    except (OSError, ValueError) as exc:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        raise ManifestError(f"cannot read manifest {path}: {exc}") from exc

    if not isinstance(data, list):
        raise ManifestError(f"manifest {path} must be a JSON array, got {type(data).__name__}")

    articles: List[Article] = []
    for i, entry in enumerate(data):
        if not isinstance(entry, Mapping) or not entry.get("title"):
            logger.warning("skipping manifest entry %d in %s: no title", i, path)
            continue
        articles.append(Article.from_dict(entry))
    logger.debug("loaded %d articles from %s", len(articles), path)
    return articles
