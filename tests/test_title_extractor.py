"""Unit tests for product title extraction."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import pytest
import requests

from titlescout.document import DEFAULT_USER_AGENT, HtmlDocument, fetch_document
from titlescout.title_extractor import extract_title


class FakeDocument:
    """Stub document answering fixed selector lookups."""

    def __init__(
        self,
        *,
        texts: Dict[str, str] | None = None,
        attributes: Dict[Tuple[str, str], str] | None = None,
        title: str = "",
    ) -> None:
        self._texts = texts or {}
        self._attributes = attributes or {}
        self.title = title

    def query_text(self, selector: str) -> Optional[str]:
        return self._texts.get(selector)

    def query_attribute(self, selector: str, attribute: str) -> Optional[str]:
        return self._attributes.get((selector, attribute))


OG = ('meta[property="og:title"]', "content")
META = ('meta[name="title"]', "content")


def test_heading_wins_over_every_other_source() -> None:
    document = FakeDocument(
        texts={"h1": "  Acme Drone X2 | Buy Now "},
        attributes={OG: "OG title", META: "Meta title"},
        title="Document title",
    )
    assert extract_title(document) == "Acme Drone X2"


def test_blank_heading_falls_through_to_og_title() -> None:
    document = FakeDocument(
        texts={"h1": "   "},
        attributes={OG: "Acme Drone - Amazon", META: "Meta title"},
    )
    assert extract_title(document) == "Acme Drone"


def test_meta_title_used_before_document_title() -> None:
    document = FakeDocument(attributes={META: "Meta title"}, title="Document title")
    assert extract_title(document) == "Meta title"


def test_document_title_is_last_resort() -> None:
    assert extract_title(FakeDocument(title="Acme Lamp • Store")) == "Acme Lamp"


def test_no_source_returns_none() -> None:
    assert extract_title(FakeDocument()) is None
    assert extract_title(FakeDocument(attributes={OG: ""}, title="  \n ")) is None


def test_suffix_only_title_is_found_but_blank() -> None:
    assert extract_title(FakeDocument(title="| Buy Now")) == ""


def test_html_document_reads_heading_and_meta_tags() -> None:
    document = HtmlDocument.from_html(
        "<html><head><title>Page | Shop</title>"
        "<meta property='og:title' content='Acme Kettle - Free Shipping'>"
        "<meta name='title' content='Meta Kettle'></head>"
        "<body><h1>\n  Acme  Kettle 1.7L\n</h1></body></html>"
    )

    assert document.title == "Page | Shop"
    assert document.query_attribute('meta[property="og:title"]', "content") == (
        "Acme Kettle - Free Shipping"
    )
    assert extract_title(document) == "Acme Kettle 1.7L"


def test_html_document_without_heading_uses_og_title() -> None:
    document = HtmlDocument.from_html(
        "<html><head><meta property='og:title' content='Acme Kettle - Free Shipping'>"
        "</head><body><p>text</p></body></html>"
    )
    assert document.query_text("h1") is None
    assert extract_title(document) == "Acme Kettle"


def test_html_document_with_only_title_tag() -> None:
    document = HtmlDocument.from_html("<html><head><title>Acme Mug | eBay</title></head></html>")
    assert extract_title(document) == "Acme Mug"


def test_empty_html_document_has_no_title() -> None:
    assert extract_title(HtmlDocument.from_html("<html><body></body></html>")) is None


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Stub requests session recording GET calls."""

    def __init__(self, response: FakeResponse) -> None:
        self.response = response
        self.calls: list[tuple[str, dict, int]] = []

    def get(self, url: str, *, headers: dict, timeout: int) -> FakeResponse:
        self.calls.append((url, headers, timeout))
        return self.response


def test_fetch_document_parses_downloaded_page() -> None:
    session = FakeSession(FakeResponse(b"<html><h1>Acme Drone</h1></html>"))

    document = fetch_document("https://shop.example.com/p/1", session=session, timeout=5)

    assert extract_title(document) == "Acme Drone"
    url, headers, timeout = session.calls[0]
    assert url == "https://shop.example.com/p/1"
    assert headers["User-Agent"] == DEFAULT_USER_AGENT
    assert timeout == 5


def test_fetch_document_propagates_http_errors() -> None:
    session = FakeSession(FakeResponse(b"", status_code=404))

    with pytest.raises(requests.HTTPError):
        fetch_document("https://shop.example.com/missing", session=session)
