"""HTTP fetcher returning explicit results instead of raising."""

from __future__ import annotations

import logging

from requests import Session
from requests.exceptions import RequestException

from .models import RawPage
from .results import Failure, FailureKind, Result, Success
from .validation import is_supported_url


def make_session(user_agent: str) -> Session:
    """Create the requests session shared by one discovery run."""
    session = Session()
    session.headers.update({"User-Agent": user_agent})
    return session


class RequestsFetcher:
    """Requests-based fetcher with a body mode and a status-only mode."""

    def __init__(self, *, session: Session, timeout: float, logger: logging.Logger) -> None:
        self._session = session
        self._timeout = timeout
        self._logger = logger

    def fetch(self, url: str) -> Result[RawPage]:
        if not is_supported_url(url):
            self._logger.debug("Skipping unsupported URL: %s", url)
            return Failure(FailureKind.FETCH, f"unsupported url {url!r}")
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except RequestException as exc:
            self._logger.debug("Fetch failed for %s: %s", url, exc)
            return Failure(FailureKind.FETCH, str(exc))
        page = RawPage(url=url, status_code=response.status_code, body=str(response.text))
        return Success(page)

    def probe(self, url: str) -> Result[int]:
        if not is_supported_url(url):
            self._logger.debug("Skipping unsupported URL: %s", url)
            return Failure(FailureKind.FETCH, f"unsupported url {url!r}")
        try:
            response = self._session.get(url, timeout=self._timeout)
        except RequestException as exc:
            self._logger.debug("Probe failed for %s: %s", url, exc)
            return Failure(FailureKind.FETCH, str(exc))
        return Success(response.status_code)
