"""Turn a product name into marketplace search queries."""

from __future__ import annotations

from typing import Any, List, Sequence

from .models import SearchQueries
from .normalizer import clean_title
from .vocabulary import CATEGORY_WORDS, FEATURE_WORDS, MARKETING_WORDS, PRODUCT_TYPES

MAIN_QUERY_MAX_WORDS = 6
CORE_QUERY_FALLBACK_WORDS = 3


def _words(name: str) -> List[str]:
    return name.lower().split()


def _first_match(words: Sequence[str], vocabulary: frozenset[str]) -> str:
    for word in words:
        if word in vocabulary:
            return word
    return ""


def main_query(name: str) -> str:
    """Keep the descriptive words of a cleaned name, dropping marketing filler."""

    kept = [word for word in _words(name) if word not in MARKETING_WORDS and len(word) > 1]
    return " ".join(kept[:MAIN_QUERY_MAX_WORDS])


def core_query(name: str) -> str:
    """Combine the first feature word with the first category word.

    Both scans start at the beginning of the title, so the feature may come
    after the category in the original word order.
    """

    words = _words(name)
    category = _first_match(words, CATEGORY_WORDS)
    feature = _first_match(words, FEATURE_WORDS)

    if category and feature:
        return f"{feature} {category}"
    if category or feature:
        return category or feature
    return " ".join(words[:CORE_QUERY_FALLBACK_WORDS])


def simple_query(name: str) -> str:
    """Map the name onto a canonical product type."""

    words = _words(name)
    for word in words:
        product_type = PRODUCT_TYPES.get(word)
        if product_type:
            return product_type
    return words[0] if words else ""


def build_search_queries(product_name: Any) -> SearchQueries:
    """Clean ``product_name`` and derive all three queries from it."""

    if not product_name or not isinstance(product_name, str):
        return SearchQueries()

    cleaned = clean_title(product_name)
    return SearchQueries(
        main=main_query(cleaned),
        core=core_query(cleaned),
        simple=simple_query(cleaned),
    )


def optimize_search_queries(product_name: Any) -> List[str]:
    """Return ``[main, core, simple]`` queries; empty strings for unusable input."""

    return build_search_queries(product_name).as_list()
