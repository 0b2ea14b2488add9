"""Runtime configuration model."""

from __future__ import annotations

from dataclasses import dataclass

from .validation import validate_runtime_constraints

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; ContactScout/1.0)"
DEFAULT_REQUEST_TIMEOUT = 15.0

# Google Maps search (tbm=map). The pb parameter pins the viewport and the
# response layout the URL heuristic in search.py was written against.
DEFAULT_SEARCH_URL_TEMPLATE = (
    "https://www.google.com/search?gl=es&tbm=map&q={query}"
    "&pb=!4m8!1m3!1d9806446.994310042!2d-2.7874037!3d39.2368123!3m2!1i496!2i1190"
    "!4f13.1!7i20!10b1!12m13!1m1!18b1!17m2!1e1!1e0!20m5!1e0!2e3!3b0!5e2!6b1!26b1"
    "!27b1!19m4!2m3!1i320!2i120!4i8!20m32!3m1!2i9!6m3!1m2!1i360!2i256!7m24!1m3"
    "!1e1!2b0!3e3!1m3!1e2!2b1!3e2!1m3!1e2!2b0!3e3!1m3!1e8!2b0!3e3!1m3!1e10!2b0"
    "!3e3!1m3!1e10!2b1!3e2!9b0!22m6!7e140!9s2I8nY4b6OeiB9u8P1oir8AI!15i26171"
    "!17s2I8nY4b6OeiB9u8P1oir8AI%3A566220029973!24m1!2e1!24m16!1m3!18m2!14b0"
    "!17b1!2b1!4b1!5m2!5b1!6b1!17b1!20m2!1e3!1e1!24b1!29b1!89b1!26m7!1e12!1e15"
    "!1e13!1e3!2m2!1i80!2i80!34m5!9b1!12b1!14b1!25b1!26b1!37m1!1e140!49m0!69i618"
)


@dataclass(frozen=True)
class ScoutConfig:
    """Validated network-client configuration shared by one discovery run."""

    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    search_url_template: str = DEFAULT_SEARCH_URL_TEMPLATE
    show_progress: bool = False

    def __post_init__(self) -> None:
        validate_runtime_constraints(
            user_agent=self.user_agent,
            request_timeout=self.request_timeout,
            search_url_template=self.search_url_template,
        )
