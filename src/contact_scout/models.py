"""Protocols and lightweight model types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from .results import Result


@dataclass(frozen=True)
class RawPage:
    """A successfully fetched response body."""

    url: str
    status_code: int
    body: str


@dataclass(frozen=True)
class CustomerRecord:
    """Contact emails found for one candidate site."""

    url: str
    emails: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {"url": self.url, "emails": list(self.emails)}


class Fetcher(Protocol):
    """Contract for HTTP fetchers."""

    def fetch(self, url: str) -> Result[RawPage]:
        """Return the page body, or a fetch failure for errors and non-2xx statuses."""

    def probe(self, url: str) -> Result[int]:
        """Return the response status code, or a fetch failure for transport errors."""


class SearchBackend(Protocol):
    """Contract for map/search providers."""

    def search(self, query: str) -> list[str]:
        """Return candidate site URLs for a free-text query."""


LinkFinder = Callable[[str], list[str]]
ContactPageFinder = Callable[[str, Fetcher], Result[str]]
