"""Pick a product title out of a page's heading, meta tags or title."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from .document import DocumentLike
from .normalizer import clean_title

logger = logging.getLogger(__name__)

HEADING_SELECTOR = "h1"
OG_TITLE_SELECTOR = 'meta[property="og:title"]'
META_TITLE_SELECTOR = 'meta[name="title"]'

# Highest priority first; the first non-blank candidate wins.
TITLE_SOURCES: Tuple[Tuple[str, Callable[[DocumentLike], Optional[str]]], ...] = (
    ("heading", lambda doc: doc.query_text(HEADING_SELECTOR)),
    ("og:title", lambda doc: doc.query_attribute(OG_TITLE_SELECTOR, "content")),
    ("meta-title", lambda doc: doc.query_attribute(META_TITLE_SELECTOR, "content")),
    ("document-title", lambda doc: doc.title),
)


def extract_title(document: DocumentLike) -> Optional[str]:
    """Return the cleaned product title, or None when no source has text."""

    for source, read in TITLE_SOURCES:
        candidate = (read(document) or "").strip()
        if candidate:
            logger.debug("Using %s as product title source", source)
            return clean_title(candidate)
    logger.debug("No product title found")
    return None
