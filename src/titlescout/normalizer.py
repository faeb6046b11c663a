"""Shared cleaning of raw product titles."""

from __future__ import annotations

import re
from typing import Any

_SEPARATORS = (r"\|", "-", "•")

_COMMON_SUFFIXES = (
    "buy now",
    "free shipping",
    "fast shipping",
    "amazon",
    "ebay",
    "walmart",
    "target",
    "shop",
    "store",
    "online",
    "official store",
    "official site",
)

# "next day delivery" only ever shows up after a pipe.
_PIPE_ONLY_SUFFIXES = ("next day delivery",)

_WHITESPACE_REGEX = re.compile(r"\s+")


def _suffix_pattern(separator: str, phrase: str) -> re.Pattern[str]:
    words = r"\s+".join(re.escape(word) for word in phrase.split())
    return re.compile(rf"\s*{separator}\s*{words}\s*$", re.IGNORECASE)


def _build_suffix_patterns() -> tuple[re.Pattern[str], ...]:
    patterns: list[re.Pattern[str]] = []
    for separator in _SEPARATORS:
        phrases = list(_COMMON_SUFFIXES)
        if separator == r"\|":
            phrases[3:3] = _PIPE_ONLY_SUFFIXES
        patterns.extend(_suffix_pattern(separator, phrase) for phrase in phrases)
    return tuple(patterns)


SUFFIX_PATTERNS = _build_suffix_patterns()


def clean_title(text: Any) -> str:
    """Strip trailing marketing annotations and normalize whitespace.

    Every pattern in ``SUFFIX_PATTERNS`` is applied once, in order, so a title
    carrying several stacked suffixes may keep some of them.
    """

    if not text or not isinstance(text, str):
        return ""

    cleaned = text
    for pattern in SUFFIX_PATTERNS:
        cleaned = pattern.sub("", cleaned, count=1)
    return _WHITESPACE_REGEX.sub(" ", cleaned).strip()
