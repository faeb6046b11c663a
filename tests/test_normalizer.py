"""Unit tests for marketing suffix removal."""

from __future__ import annotations

import pytest

from titlescout.normalizer import SUFFIX_PATTERNS, clean_title


def test_empty_and_missing_titles_clean_to_empty_string() -> None:
    assert clean_title("") == ""
    assert clean_title(None) == ""
    assert clean_title(42) == ""


@pytest.mark.parametrize(
    "raw",
    [
        "Widget | Buy Now",
        "Widget - Official Store",
        "Widget  •   eBay",
        "Widget | NEXT DAY   delivery",
        "Widget-free shipping",
        "Widget | Official Site  ",
    ],
)
def test_trailing_marketing_suffix_is_removed(raw: str) -> None:
    assert clean_title(raw) == "Widget"


def test_whitespace_is_collapsed_and_trimmed() -> None:
    assert clean_title("  Acme \t Drone\n  X2  ") == "Acme Drone X2"


def test_suffix_words_inside_title_are_kept() -> None:
    assert clean_title("Amazon Echo Dot - Charcoal") == "Amazon Echo Dot - Charcoal"
    assert clean_title("Shop Vac | Wet Dry") == "Shop Vac | Wet Dry"


def test_next_day_delivery_only_stripped_after_pipe() -> None:
    assert clean_title("Widget - Next Day Delivery") == "Widget - Next Day Delivery"


def test_patterns_run_once_each_in_order() -> None:
    # "| buy now" is tried before "| amazon" is gone, so it survives one pass.
    once = clean_title("Widget | Buy Now | Amazon")
    assert once == "Widget | Buy Now"
    assert clean_title(once) == "Widget"

    # Every pipe pattern precedes the dash patterns.
    assert clean_title("Widget - Amazon | Buy Now") == "Widget"


@pytest.mark.parametrize(
    "raw",
    ["Widget | Buy Now", "Acme   Drone", "Widget • Store", "plain title", ""],
)
def test_cleaning_is_idempotent(raw: str) -> None:
    once = clean_title(raw)
    assert clean_title(once) == once


def test_pattern_table_covers_each_separator() -> None:
    assert len(SUFFIX_PATTERNS) == 13 + 12 + 12
