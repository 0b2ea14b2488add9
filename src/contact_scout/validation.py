"""URL checks and runtime guardrails."""

from __future__ import annotations

from urllib.parse import urlparse

from .errors import ConfigError

QUERY_PLACEHOLDER = "{query}"


def is_supported_url(url: str) -> bool:
    """Allow only absolute HTTP(S) URLs with a hostname."""
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def normalize_url(url: str) -> str:
    """Strip a single trailing slash."""
    if url.endswith("/"):
        return url[:-1]
    return url


def validate_runtime_constraints(
    *,
    user_agent: str,
    request_timeout: float,
    search_url_template: str,
) -> None:
    """Validate runtime configuration and raise ConfigError on invalid values."""
    if not user_agent.strip():
        raise ConfigError("--user-agent cannot be blank.")
    if request_timeout <= 0:
        raise ConfigError("--timeout must be > 0.")
    if QUERY_PLACEHOLDER not in search_url_template:
        raise ConfigError(f"--search-url-template must contain {QUERY_PLACEHOLDER}.")
    if not is_supported_url(search_url_template.replace(QUERY_PLACEHOLDER, "")):
        raise ConfigError("--search-url-template must be an absolute HTTP(S) URL.")
