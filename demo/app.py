import html
import logging
from string import Template
from typing import Any, Dict, List, Optional, Sequence

from flask import Flask, jsonify, request
from markupsafe import Markup

from lwcsearch.analysis import query_terms
from lwcsearch.articles import Article, load_manifest
from lwcsearch.config import Settings, load_settings
from lwcsearch.page import INPUT_EVENT, FieldEvent, InputField, init_url_search
from lwcsearch.ranking import ScoredArticle
from lwcsearch.search import highlight_markup, make_snippet, rank

from .sample_docs import SAMPLE_ARTICLES

logger = logging.getLogger(__name__)

HTML_TEMPLATE = Template("""
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>LWC.guide search</title>
  <style>
    body { font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial; margin: 24px; }
    .box { max-width: 900px; margin: 0 auto; }
    input[type=text] { width: 100%; padding: 12px 14px; font-size: 16px; border: 1px solid #ccc; border-radius: 10px; }
    .hit { border: 1px solid #eee; border-radius: 12px; padding: 12px 14px; margin: 12px 0; box-shadow: 0 1px 2px rgba(0,0,0,.04); }
    .hit h3 { margin: 0 0 6px; font-size: 18px; }
    .hit small { color: #666; }
    mark { background: #fffa87; padding: 0 2px; }
    .pill { display: inline-block; padding: 2px 8px; border-radius: 999px; background: #f1f5f9; color: #0f172a; font-size: 12px; margin-right: 4px; }
  </style>
</head>
<body>
  <div class="box">
    <h1>LWC.guide</h1>
    <form method="get" action="/">
      <input autofocus id="$field_id" name="$param" type="text" placeholder="Search articles: wire, jest, lifecycle…" value="$q">
    </form>
    <hr/>
    $results
  </div>
</body>
</html>
""")


class RequestPage:
    """The current request seen as a page: URL parameters plus one search box."""

    def __init__(self, args, field_id: str) -> None:
        self.args = args
        self.box = InputField(field_id)

    def query_param(self, name: str) -> Optional[str]:
        return self.args.get(name)

    def find_field(self, field_id: str) -> Optional[InputField]:
        return self.box if field_id == self.box.id else None


def _article(a: Any) -> Article:
    return a if isinstance(a, Article) else Article.from_dict(a)


def _render_results(hits: Sequence[ScoredArticle], q: str, snippet_len: int) -> str:
    if not q:
        return "<p><i>Type a query…</i></p>"
    if not hits:
        return f"<p>Nothing found for <b>{html.escape(q)}</b></p>"
    terms = query_terms(q)
    out = [f"<p><b>{len(hits)}</b> results:</p>"]
    for hit in hits:
        a = hit.article
        tags = ''.join(f"<span class='pill'>{html.escape(t)}</span>" for t in a.tags)
        href = html.escape(str(a.extra.get("url", "#")))
        out.append(f"""
        <div class="hit">
          <h3><a href="{href}">{highlight_markup(a.title, terms)}</a></h3>
          <small>score: {hit.score}</small>
          <div style="margin-top:6px">{make_snippet(a.desc, terms, snippet_len)}</div>
          <div style="margin-top:8px">{tags}</div>
        </div>
        """)
    return "\n".join(out)


def _load_articles(settings: Settings) -> List[Article]:
    if settings.manifest_path:
        try:
            return load_manifest(settings.manifest_path)
        except FileNotFoundError:
            logger.warning("manifest %s not found, using sample articles", settings.manifest_path)
    return [Article.from_dict(d) for d in SAMPLE_ARTICLES]


def create_app(articles: Optional[Sequence[Any]] = None, settings: Optional[Settings] = None) -> Flask:
    settings = settings or load_settings()
    docs = [_article(a) for a in articles] if articles is not None else _load_articles(settings)
    logger.info("serving %d articles", len(docs))
    app = Flask(__name__)

    @app.get("/")
    def home():
        page = RequestPage(request.args, settings.field_id)
        state: Dict[str, Any] = {"q": "", "hits": []}

        def on_input(ev: FieldEvent) -> None:
            state["q"] = ev.target.value.strip()
            # same rule as /api/search: no usable terms, no results
            state["hits"] = rank(docs, state["q"]) if query_terms(state["q"]) else []

        page.box.add_listener(INPUT_EVENT, on_input)
        init_url_search(page, settings.query_param, settings.field_id)

        res = _render_results(state["hits"], state["q"], settings.snippet_length)
        return HTML_TEMPLATE.substitute(
            q=html.escape(page.box.value),
            param=html.escape(settings.query_param),
            field_id=html.escape(settings.field_id),
            results=Markup(res),
        )

    @app.get("/api/search")
    def api_search():
        q = request.args.get(settings.query_param, "")
        terms = query_terms(q)
        hits = rank(docs, q) if terms else []
        return jsonify(
            query=q,
            terms=terms,
            count=len(hits),
            results=[
                dict(hit.article.to_dict(), score=hit.score,
                     title_html=str(highlight_markup(hit.article.title, terms)))
                for hit in hits
            ],
        )

    return app


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app(settings=settings)
    app.run(host=settings.host, port=settings.port, debug=False)


if __name__ == "__main__":
    main()
