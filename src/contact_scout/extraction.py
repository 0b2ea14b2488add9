"""Email pattern matching, placeholder filtering and deduplication."""

from __future__ import annotations

import re
from itertools import product

from .results import Failure, FailureKind, Result, Success

EMAIL_REGEX = re.compile(r"[a-z0-9-]+@[a-z0-9-]+\.[a-z.]+", re.IGNORECASE)
WHITESPACE_REGEX = re.compile(r"\s")

# Asset names such as "logo@2x.png" look like emails.
IMAGE_EXTENSIONS = frozenset({"png", "jpg", "gif"})

PLACEHOLDER_NAMES = ("name", "youremail")
PLACEHOLDER_DOMAINS = ("example", "domain", "yourdomain")
PLACEHOLDER_PREFIXES = frozenset(
    f"{name}@{domain}." for name, domain in product(PLACEHOLDER_NAMES, PLACEHOLDER_DOMAINS)
)


def _domain_labels(email: str) -> list[str]:
    return email.rpartition("@")[2].lower().split(".")


def is_plausible_email(candidate: str) -> bool:
    """Reject whitespace-spanning matches and image-file lookalikes."""
    if WHITESPACE_REGEX.search(candidate):
        return False
    return not any(label in IMAGE_EXTENSIONS for label in _domain_labels(candidate))


def _trim_match(token: str) -> str | None:
    """Drop trailing sentence dots; None when no dot is left in the domain."""
    email = token.rstrip(".")
    if "." not in email.partition("@")[2]:
        return None
    return email


def extract_emails(text: str) -> Result[list[str]]:
    """Return email-shaped tokens from raw text, in order of appearance.

    A text with no email-shaped token at all is an extraction failure. A text
    whose tokens were all rejected succeeds with an empty list.
    """
    trimmed = (_trim_match(match.group(0)) for match in EMAIL_REGEX.finditer(text or ""))
    matches = [email for email in trimmed if email]
    if not matches:
        return Failure(FailureKind.EXTRACTION, "no email-shaped tokens")
    return Success([email for email in matches if is_plausible_email(email)])


def placeholder_prefix(email: str) -> str | None:
    """Return ``local@first-label.`` as written, or None when the domain has no dot."""
    local, at, domain = email.partition("@")
    if not at or "." not in domain:
        return None
    return f"{local}@{domain.split('.', maxsplit=1)[0]}."


def is_placeholder_email(email: str) -> bool:
    return placeholder_prefix(email) in PLACEHOLDER_PREFIXES


def validate_emails(emails: list[str]) -> list[str]:
    """Drop template boilerplate such as ``name@example.com``."""
    return [email for email in emails if not is_placeholder_email(email)]


def dedupe_preserve_order(items: list[str]) -> list[str]:
    """Dedupe values while preserving first-seen order."""
    output: list[str] = []
    seen: set[str] = set()
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        output.append(item)
    return output
