from __future__ import annotations


class TitleLinkError(Exception):
    """Base class for title resolution failures."""


class TransientLookupError(TitleLinkError):
    """A lookup service call failed or answered with something unparseable."""

    def __init__(self, service_url: str, message: str) -> None:
        super().__init__(f"{service_url}: {message}")
        self.service_url = service_url


class LookupUnavailableError(TitleLinkError):
    """Raised when the lookup services stay unavailable after every retry."""

    def __init__(self, title_form: str, attempts: int) -> None:
        super().__init__(
            f"label lookup for {title_form!r} still failing after {attempts} attempts"
        )
        self.title_form = title_form
        self.attempts = attempts


class GraphQueryError(TitleLinkError):
    """The SPARQL endpoint failed or returned an unusable result set."""
