"""Contact-link discovery in fetched HTML."""

from __future__ import annotations

from bs4 import BeautifulSoup

from .extraction import dedupe_preserve_order

CONTACT_WORD = "contact"
ABSOLUTE_SCHEMES = ("http://", "https://")


def find_contact_links(html: str) -> list[str]:
    """Return absolute links whose anchor text mentions "contact"."""
    links: list[str] = []
    soup = BeautifulSoup(html or "", "html.parser")
    for anchor in soup.find_all("a", href=True):
        href = str(anchor["href"]).strip()
        if not href.lower().startswith(ABSOLUTE_SCHEMES):
            continue
        if CONTACT_WORD not in anchor.get_text(" ", strip=True).lower():
            continue
        links.append(href)
    return dedupe_preserve_order(links)
