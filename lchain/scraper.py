"""A tool that fetches a web page and returns its visible text."""

from __future__ import annotations

import re
from collections.abc import Iterator

import httpx
from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from lchain.tools import Tool

_WHITESPACE = re.compile(r"\s+")


def _texts(tag: Tag) -> Iterator[str]:
    for node in tag.children:
        if isinstance(node, Tag):
            if node.name != "script":
                yield from _texts(node)
        elif isinstance(node, NavigableString) and not isinstance(node, PreformattedString):
            yield str(node)


def extract_text(html: str) -> str:
    """Return the text of the page body, outside scripts, with whitespace collapsed."""
    soup = BeautifulSoup(html, "html.parser")
    roots = soup.find_all("body")
    if not roots:
        for head in soup.find_all("head"):
            head.decompose()
        roots = [soup]
    text = " ".join(chunk for root in roots for chunk in _texts(root))
    return _WHITESPACE.sub(" ", text)


async def scrape_url(url: str) -> str:
    """Fetch `url` and return the text of its body."""
    async with httpx.AsyncClient(follow_redirects=True) as client:
        response = await client.get(url)
    return extract_text(response.text)


class WebScraper(Tool):
    """Returns the text content of a web page."""

    def name(self) -> str:
        return "Web Scraper"

    def description(self) -> str:
        return (
            "Web Scraper will scan a url and return the content of the web page.\n"
            "\t\tInput should be a working url."
        )

    async def call(self, input: str) -> str:
        try:
            return await scrape_url(input)
        except Exception as exc:
            return f"Error scraping {input}: {exc}\n"