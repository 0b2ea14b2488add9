"""Guess conventional contact-page paths under a site."""

from __future__ import annotations

from functools import partial

from .models import Fetcher
from .results import Failure, FailureKind, Result, Success, and_then, first_success
from .validation import normalize_url

# Probed in this order; the first one answering 200 wins.
CONTACT_PATH_SUFFIXES = (
    "contact",
    "contacto",
    "contacte",
    "Contact",
    "Contacto",
    "Contacte",
)
SUCCESS_STATUS = 200


def contact_page_urls(base_url: str) -> list[str]:
    base = normalize_url(base_url)
    return [f"{base}/{suffix}" for suffix in CONTACT_PATH_SUFFIXES]


def _require_success(url: str, status_code: int) -> Result[str]:
    if status_code == SUCCESS_STATUS:
        return Success(url)
    return Failure(FailureKind.NOT_FOUND, f"{url} answered {status_code}")


def _probe(url: str, fetcher: Fetcher) -> Result[str]:
    return and_then(fetcher.probe(url), partial(_require_success, url))


def fuzz_contact_page(base_url: str, fetcher: Fetcher) -> Result[str]:
    """Return the first guessed contact page that exists, or a not-found failure."""
    attempts = [partial(_probe, url, fetcher) for url in contact_page_urls(base_url)]
    outcome = first_success(attempts)
    if isinstance(outcome, Success):
        return outcome
    return Failure(FailureKind.NOT_FOUND, f"no contact page under {base_url}")
