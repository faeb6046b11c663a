"""Read-only access to the parts of a web page a title can come from."""

from __future__ import annotations

from typing import Optional, Protocol

import requests
from bs4 import BeautifulSoup

DEFAULT_USER_AGENT = "titlescout/0.1"
DEFAULT_HEADERS = {"User-Agent": DEFAULT_USER_AGENT}


class DocumentLike(Protocol):
    """Minimal document surface needed by the title extractor."""

    @property
    def title(self) -> str: ...

    def query_text(self, selector: str) -> Optional[str]:
        """Text content of the first element matching ``selector``."""

    def query_attribute(self, selector: str, attribute: str) -> Optional[str]:
        """Attribute value of the first element matching ``selector``."""


class HtmlDocument:
    """``DocumentLike`` over a static HTML string."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    @classmethod
    def from_html(cls, html_text: str | bytes) -> "HtmlDocument":
        return cls(BeautifulSoup(html_text, "lxml"))

    @property
    def title(self) -> str:
        node = self.soup.title
        return node.get_text() if node else ""

    def query_text(self, selector: str) -> Optional[str]:
        node = self.soup.select_one(selector)
        return node.get_text() if node else None

    def query_attribute(self, selector: str, attribute: str) -> Optional[str]:
        node = self.soup.select_one(selector)
        if node is None:
            return None
        value = node.get(attribute)
        if isinstance(value, list):
            return " ".join(value)
        return value


def fetch_document(
    url: str,
    *,
    session: requests.Session | None = None,
    timeout: int = 20,
) -> HtmlDocument:
    """Download ``url`` and parse it; HTTP failures raise ``requests.RequestException``."""

    http = session or requests.Session()
    response = http.get(url, headers=DEFAULT_HEADERS, timeout=timeout)
    response.raise_for_status()
    return HtmlDocument.from_html(response.content)
