"""Map search backend and candidate-site URL mining.

The upstream map search answers with deeply nested arrays of mixed types and
no documented schema. Instead of walking that structure, the whole response is
turned into text and mined for absolute URLs. This is brittle by nature, so the
heuristic lives in :func:`extract_candidate_urls` alone and can be replaced by
a structured parser without touching the rest of the pipeline.
"""

from __future__ import annotations

import json
import logging
import re
from urllib.parse import quote, urlparse

from .errors import SearchError
from .extraction import dedupe_preserve_order
from .models import Fetcher
from .results import Success
from .validation import QUERY_PLACEHOLDER, is_supported_url, normalize_url

URL_REGEX = re.compile(r"https?://[^\s\"'\\<>#?,;()\[\]]+", re.IGNORECASE)
XSSI_PREFIX = ")]}'"
# Same unreserved set as JavaScript's encodeURIComponent.
QUERY_SAFE_CHARS = "-_.!~*'()"

GOOGLE_SITES_HOST = "sites.google.com"
INTERNAL_HOST_MARKERS = ("google", "gstatic", "ggpht")


def encode_query(query: str) -> str:
    return quote(query, safe=QUERY_SAFE_CHARS)


def build_search_url(query: str, url_template: str) -> str:
    return url_template.replace(QUERY_PLACEHOLDER, encode_query(query))


def response_text(body: str, logger: logging.Logger | None = None) -> str:
    """Flatten an untyped search response into searchable text."""
    raw = body or ""
    stripped = raw.lstrip()
    if stripped.startswith(XSSI_PREFIX):
        stripped = stripped[len(XSSI_PREFIX) :]
    try:
        payload = json.loads(stripped)
    except ValueError as exc:
        if logger is not None:
            logger.debug("Search response is not JSON, mining raw text: %s", exc)
        return raw
    return json.dumps(payload, ensure_ascii=False)


def _is_internal_host(host: str) -> bool:
    if host == GOOGLE_SITES_HOST:
        return False
    return any(marker in host for marker in INTERNAL_HOST_MARKERS)


def _candidate_from_match(url: str) -> str | None:
    parsed = urlparse(url)
    host = parsed.netloc.lower()
    if not host or _is_internal_host(host):
        return None
    # Google Sites pages share one host; the path is what identifies the customer.
    if host == GOOGLE_SITES_HOST:
        return url
    return f"{parsed.scheme}://{parsed.netloc}"


def extract_candidate_urls(text: str) -> list[str]:
    """Mine candidate site URLs from search response text.

    Each URL is reduced to its origin, except Google Sites pages, which keep
    their path. Google's own hosts are dropped. Results are deduped in order of
    first appearance and lose one trailing slash.
    """
    candidates: list[str] = []
    for match in URL_REGEX.finditer(text or ""):
        candidate = _candidate_from_match(match.group(0))
        if candidate and is_supported_url(candidate):
            candidates.append(candidate)
    return dedupe_preserve_order([normalize_url(url) for url in dedupe_preserve_order(candidates)])


class MapsSearchBackend:
    """Single-request map search mined for candidate sites."""

    def __init__(self, *, fetcher: Fetcher, url_template: str, logger: logging.Logger) -> None:
        self._fetcher = fetcher
        self._url_template = url_template
        self._logger = logger

    def search(self, query: str) -> list[str]:
        url = build_search_url(query, self._url_template)
        outcome = self._fetcher.fetch(url)
        if not isinstance(outcome, Success):
            raise SearchError(f"Map search failed for {query!r}: {outcome.reason}")
        urls = extract_candidate_urls(response_text(outcome.value.body, self._logger))
        self._logger.info("Map search for %r returned %d candidate sites", query, len(urls))
        return urls
