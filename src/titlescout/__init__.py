"""Product title extraction and marketplace search query building."""

from .document import DocumentLike, HtmlDocument, fetch_document
from .marketplaces import build_search_urls, open_all, open_one
from .models import ProductSearchPlan, SearchQueries
from .normalizer import clean_title
from .query_optimizer import build_search_queries, optimize_search_queries
from .title_extractor import extract_title

__all__ = [
    "DocumentLike",
    "HtmlDocument",
    "ProductSearchPlan",
    "SearchQueries",
    "build_search_queries",
    "build_search_urls",
    "clean_title",
    "extract_title",
    "fetch_document",
    "open_all",
    "open_one",
    "optimize_search_queries",
]
