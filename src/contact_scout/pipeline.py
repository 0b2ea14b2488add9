"""Core orchestration pipeline."""

from __future__ import annotations

import logging
from functools import partial

from bs4.exceptions import ParserRejectedMarkup
from tqdm import tqdm

from .config import ScoutConfig
from .extraction import dedupe_preserve_order, extract_emails, validate_emails
from .fetchers import RequestsFetcher, make_session
from .fuzzer import fuzz_contact_page
from .links import find_contact_links
from .logging_utils import get_logger
from .models import (
    ContactPageFinder,
    CustomerRecord,
    Fetcher,
    LinkFinder,
    RawPage,
    SearchBackend,
)
from .results import Failure, FailureKind, Result, Success, and_then, first_success, value_or
from .search import MapsSearchBackend


def _page_body(page: RawPage) -> Result[str]:
    return Success(page.body)


def scrape_emails(url: str, fetcher: Fetcher) -> Result[list[str]]:
    """Fetch a page and extract the emails it mentions."""
    return and_then(and_then(fetcher.fetch(url), _page_body), extract_emails)


def _direct_stage(home: Result[RawPage]) -> Result[list[str]]:
    return and_then(and_then(home, _page_body), extract_emails)


def _fuzz_stage(
    url: str, fetcher: Fetcher, contact_page_finder: ContactPageFinder, logger: logging.Logger
) -> Result[list[str]]:
    contact_page = contact_page_finder(url, fetcher)
    if isinstance(contact_page, Success):
        logger.debug("Guessed contact page for %s: %s", url, contact_page.value)
    return and_then(contact_page, partial(scrape_emails, fetcher=fetcher))


def _inspect_stage(
    home: Result[RawPage], fetcher: Fetcher, link_finder: LinkFinder, logger: logging.Logger
) -> Result[list[str]]:
    if not isinstance(home, Success):
        return home
    try:
        links = link_finder(home.value.body)
    except ParserRejectedMarkup as exc:
        logger.debug("Could not parse %s for contact links: %s", home.value.url, exc)
        return Failure(FailureKind.PARSE, str(exc))
    if not links:
        return Failure(FailureKind.NOT_FOUND, f"no contact links on {home.value.url}")

    # One link at a time, so the accumulated emails follow link order.
    emails: list[str] = []
    for link in links:
        outcome = scrape_emails(link, fetcher)
        if isinstance(outcome, Failure):
            logger.debug("Contact link %s yielded nothing: %s", link, outcome.kind.value)
            continue
        emails.extend(outcome.value)
    return Success(emails)


def extract_data(
    url: str,
    *,
    fetcher: Fetcher,
    link_finder: LinkFinder = find_contact_links,
    contact_page_finder: ContactPageFinder = fuzz_contact_page,
    logger: logging.Logger,
) -> CustomerRecord:
    """Find contact emails for one site through the fallback chain.

    Stages, each tried only when the previous ones found nothing:

    1. emails on the site's own page;
    2. emails on a guessed contact page (``/contact``, ``/contacto``, ...);
    3. emails on every page linked from an anchor mentioning "contact".

    Duplicates and template placeholders are removed from whichever stage
    succeeded. Fetch and parse problems only ever make a stage come up empty;
    a site with no reachable emails gets a record with no emails.
    """
    home = fetcher.fetch(url)
    stages = [
        partial(_direct_stage, home),
        partial(_fuzz_stage, url, fetcher, contact_page_finder, logger),
        partial(_inspect_stage, home, fetcher, link_finder, logger),
    ]
    emails = value_or(first_success(stages), [])
    emails = validate_emails(dedupe_preserve_order(emails))
    logger.debug("Found %d emails for %s", len(emails), url)
    return CustomerRecord(url=url, emails=tuple(emails))


def collect_customers(
    query: str,
    *,
    search_backend: SearchBackend,
    fetcher: Fetcher,
    link_finder: LinkFinder = find_contact_links,
    contact_page_finder: ContactPageFinder = fuzz_contact_page,
    show_progress: bool = False,
    logger: logging.Logger,
) -> list[CustomerRecord]:
    """Search for candidate sites and extract a record for each, in discovery order."""
    candidate_urls = search_backend.search(query)
    logger.info("Total candidate sites to scan: %d", len(candidate_urls))

    iterator = candidate_urls
    if show_progress:
        iterator = tqdm(candidate_urls, total=len(candidate_urls), desc="scanning sites")

    records: list[CustomerRecord] = []
    for url in iterator:
        try:
            record = extract_data(
                url,
                fetcher=fetcher,
                link_finder=link_finder,
                contact_page_finder=contact_page_finder,
                logger=logger,
            )
        except Exception as exc:
            logger.warning("Skipping %s after unexpected error: %s", url, exc)
            continue
        records.append(record)

    found = sum(1 for record in records if record.emails)
    logger.info("Sites with at least one email: %d of %d", found, len(records))
    return records


def get_possible_customers(
    query: str,
    config: ScoutConfig | None = None,
    *,
    logger: logging.Logger | None = None,
) -> list[CustomerRecord]:
    """Build concrete dependencies and run one discovery for ``query``.

    Raises SearchError when the map search itself cannot be fetched.
    """
    config = config or ScoutConfig()
    logger = logger or get_logger()
    session = make_session(config.user_agent)
    try:
        fetcher = RequestsFetcher(session=session, timeout=config.request_timeout, logger=logger)
        search_backend = MapsSearchBackend(
            fetcher=fetcher, url_template=config.search_url_template, logger=logger
        )
        return collect_customers(
            query,
            search_backend=search_backend,
            fetcher=fetcher,
            show_progress=config.show_progress,
            logger=logger,
        )
    finally:
        session.close()
