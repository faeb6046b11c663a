"""Marketplace search URLs and helpers for opening them."""

from __future__ import annotations

import logging
import webbrowser
from types import MappingProxyType
from typing import Any, Callable, Dict
from urllib.parse import quote

logger = logging.getLogger(__name__)

MARKETPLACE_SEARCH_TEMPLATES = MappingProxyType(
    {
        "amazon": "https://www.amazon.com/s?k={query}",
        "ebay": "https://www.ebay.com/sch/i.html?_nkw={query}",
        "aliexpress": "https://www.aliexpress.com/wholesale?SearchText={query}",
    }
)

NEW_TAB = "_blank"

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"

Opener = Callable[[str, str], None]


def browser_opener(url: str, target: str = NEW_TAB) -> None:
    """Open ``url`` with the system browser; ``target`` other than a new tab reuses the window."""

    if target == NEW_TAB:
        webbrowser.open_new_tab(url)
    else:
        webbrowser.open(url)


def encode_query(query: str) -> str:
    return quote(query, safe=_URI_COMPONENT_SAFE)


def build_search_urls(query: Any) -> Dict[str, str]:
    """Map each marketplace key to its search URL; every URL is empty for unusable input."""

    if not query or not isinstance(query, str):
        return {key: "" for key in MARKETPLACE_SEARCH_TEMPLATES}

    encoded = encode_query(query.strip())
    return {
        key: template.format(query=encoded)
        for key, template in MARKETPLACE_SEARCH_TEMPLATES.items()
    }


def open_all(query: Any, opener: Opener = browser_opener) -> None:
    """Open the search page of every marketplace for ``query``."""

    for key, url in build_search_urls(query).items():
        if url:
            logger.debug("Opening %s search: %s", key, url)
            opener(url, NEW_TAB)


def open_one(marketplace: str, query: Any, opener: Opener = browser_opener) -> bool:
    """Open one marketplace search, matching the key case-insensitively.

    An unknown marketplace (or an unusable query) is logged as
    ``UnknownMarketplace`` and nothing is opened.
    """

    key = (marketplace or "").lower()
    if key not in MARKETPLACE_SEARCH_TEMPLATES:
        logger.error("UnknownMarketplace: invalid marketplace %r", marketplace)
        return False

    url = build_search_urls(query)[key]
    if not url:
        logger.error("UnknownMarketplace: no search URL for %r (empty query)", marketplace)
        return False

    logger.debug("Opening %s search: %s", key, url)
    opener(url, NEW_TAB)
    return True
