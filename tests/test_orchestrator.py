import logging

from bs4.exceptions import ParserRejectedMarkup

from contact_scout.models import CustomerRecord, Fetcher, RawPage
from contact_scout.pipeline import extract_data, scrape_emails
from contact_scout.results import Failure, FailureKind, Result, Success


class PageFetcher:
    """Serves pages from a dict; anything else fails like an unreachable host."""

    def __init__(self, pages: dict[str, str], statuses: dict[str, int] | None = None) -> None:
        self.pages = pages
        self.statuses = statuses or {}
        self.fetched: list[str] = []
        self.probed: list[str] = []

    def fetch(self, url: str) -> Result[RawPage]:
        self.fetched.append(url)
        if url not in self.pages:
            return Failure(FailureKind.FETCH, "unreachable")
        return Success(RawPage(url=url, status_code=200, body=self.pages[url]))

    def probe(self, url: str) -> Result[int]:
        self.probed.append(url)
        if url in self.statuses:
            return Success(self.statuses[url])
        return Failure(FailureKind.FETCH, "unreachable")


class CountingLinkFinder:
    def __init__(self, links: list[str]) -> None:
        self.links = links
        self.calls = 0

    def __call__(self, html: str) -> list[str]:
        self.calls += 1
        return list(self.links)


class CountingPageFinder:
    def __init__(self, outcome: Result[str]) -> None:
        self.outcome = outcome
        self.calls = 0

    def __call__(self, base_url: str, fetcher: Fetcher) -> Result[str]:
        self.calls += 1
        return self.outcome


LOGGER = logging.getLogger("test")


def test_direct_scrape_skips_fuzzer_and_link_inspector() -> None:
    fetcher = PageFetcher({"https://acme.com": "info@acme.com sales@acme.com info@acme.com"})
    link_finder = CountingLinkFinder(["https://acme.com/contact"])
    page_finder = CountingPageFinder(Success("https://acme.com/contact"))

    record = extract_data(
        "https://acme.com",
        fetcher=fetcher,
        link_finder=link_finder,
        contact_page_finder=page_finder,
        logger=LOGGER,
    )

    assert record == CustomerRecord(
        url="https://acme.com", emails=("info@acme.com", "sales@acme.com")
    )
    assert page_finder.calls == 0
    assert link_finder.calls == 0
    assert fetcher.fetched == ["https://acme.com"]


def test_fuzzed_contact_page_is_scraped_when_home_has_no_emails() -> None:
    fetcher = PageFetcher(
        {
            "https://acme.com": "<p>Welcome</p>",
            "https://acme.com/contacto": "hola@acme.es",
        }
    )
    link_finder = CountingLinkFinder(["https://acme.com/other"])
    page_finder = CountingPageFinder(Success("https://acme.com/contacto"))

    record = extract_data(
        "https://acme.com",
        fetcher=fetcher,
        link_finder=link_finder,
        contact_page_finder=page_finder,
        logger=LOGGER,
    )

    assert record.emails == ("hola@acme.es",)
    assert page_finder.calls == 1
    assert link_finder.calls == 0


def test_contact_links_are_scraped_in_order_and_failures_skipped() -> None:
    fetcher = PageFetcher(
        {
            "https://acme.com": '<a href="https://acme.com/a">Contact</a>',
            "https://acme.com/a": "a@acme.com shared@acme.com",
            "https://partner.com/c": "shared@acme.com c@partner.com name@example.com",
        }
    )
    link_finder = CountingLinkFinder(
        ["https://acme.com/a", "https://broken.example/x", "https://partner.com/c"]
    )
    page_finder = CountingPageFinder(Failure(FailureKind.NOT_FOUND))

    record = extract_data(
        "https://acme.com",
        fetcher=fetcher,
        link_finder=link_finder,
        contact_page_finder=page_finder,
        logger=LOGGER,
    )

    assert record.emails == ("a@acme.com", "shared@acme.com", "c@partner.com")
    assert page_finder.calls == 1
    assert link_finder.calls == 1
    assert fetcher.fetched == [
        "https://acme.com",
        "https://acme.com/a",
        "https://broken.example/x",
        "https://partner.com/c",
    ]


def test_home_page_is_fetched_once_for_direct_and_link_stages() -> None:
    fetcher = PageFetcher({"https://acme.com": "<p>nothing</p>"})
    extract_data(
        "https://acme.com",
        fetcher=fetcher,
        link_finder=CountingLinkFinder([]),
        contact_page_finder=CountingPageFinder(Failure(FailureKind.NOT_FOUND)),
        logger=LOGGER,
    )
    assert fetcher.fetched == ["https://acme.com"]


def test_unreachable_site_yields_empty_record() -> None:
    fetcher = PageFetcher({})
    link_finder = CountingLinkFinder(["https://acme.com/contact"])

    record = extract_data(
        "https://down.example", fetcher=fetcher, link_finder=link_finder, logger=LOGGER
    )

    assert record == CustomerRecord(url="https://down.example", emails=())
    assert link_finder.calls == 0
    assert fetcher.probed[0] == "https://down.example/contact"
    assert len(fetcher.probed) == 6


def test_placeholders_only_still_yield_a_record() -> None:
    fetcher = PageFetcher({"https://template.site": "name@example.com youremail@yourdomain.com"})
    record = extract_data("https://template.site", fetcher=fetcher, logger=LOGGER)
    assert record.emails == ()
    assert fetcher.probed == []


def test_default_fuzzer_is_used_with_the_real_fetcher_contract() -> None:
    fetcher = PageFetcher(
        {
            "https://acme.com": "<p>Welcome</p>",
            "https://acme.com/contacte": "bon@acme.cat",
        },
        statuses={"https://acme.com/contact": 404, "https://acme.com/contacte": 200},
    )
    record = extract_data("https://acme.com", fetcher=fetcher, logger=LOGGER)
    assert record.emails == ("bon@acme.cat",)
    assert fetcher.probed == [
        "https://acme.com/contact",
        "https://acme.com/contacto",
        "https://acme.com/contacte",
    ]


def test_scrape_emails_propagates_fetch_failure() -> None:
    outcome = scrape_emails("https://nowhere.example", PageFetcher({}))
    assert isinstance(outcome, Failure)
    assert outcome.kind is FailureKind.FETCH


def test_rejected_markup_makes_link_stage_come_up_empty() -> None:
    def rejecting_link_finder(html: str) -> list[str]:
        raise ParserRejectedMarkup("markup rejected")

    fetcher = PageFetcher({"https://acme.com": "<p>no emails</p>"})
    record = extract_data(
        "https://acme.com",
        fetcher=fetcher,
        link_finder=rejecting_link_finder,
        contact_page_finder=CountingPageFinder(Failure(FailureKind.NOT_FOUND)),
        logger=LOGGER,
    )
    assert record == CustomerRecord(url="https://acme.com", emails=())
