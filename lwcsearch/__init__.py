from .analysis import normalize, query_terms, MIN_TERM_LENGTH
from .utils import escape_regex, word_start_regex
from .articles import Article, ManifestError, load_manifest
from .ranking import ScoredArticle, score_article
from .search import search, rank, highlight, highlight_markup, make_snippet
from .page import InputField, PageHost, SearchField, StaticPage, init_url_search
from .config import Settings, load_settings
