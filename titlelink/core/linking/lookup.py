from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterator, List
from urllib.parse import quote

import requests

from ...errors import TransientLookupError
from ...models import Candidate
from .titles import capitalize_title

logger = logging.getLogger(__name__)


class _LookupClient(ABC):
    """
    Shared plumbing of the label-lookup style services:
    ``GET {base_url}/search/{title}?ver=1`` answering ``{"results": [...]}``.
    """

    _TAG = "lookup"
    _UA = "titlelink/0.1 (label lookup)"

    def __init__(
        self,
        base_url: str,
        *,
        timeout_s: float = 10,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self._session = session or requests.Session()
        self._session.headers.setdefault("User-Agent", self._UA)

    def search_url(self, label: str) -> str:
        encoded = quote(capitalize_title(label), safe="")
        return f"{self.base_url}/search/{encoded}"

    def _results(self, label: str) -> Iterator[Candidate]:
        url = self.search_url(label)
        try:
            r = self._session.get(url, params={"ver": 1}, timeout=self.timeout_s)
            r.raise_for_status()
            payload = r.json()
        except requests.exceptions.RequestException as e:
            raise TransientLookupError(self.base_url, f"request for {label!r} failed: {e}") from e
        except ValueError as e:
            raise TransientLookupError(self.base_url, f"non-JSON response for {label!r}") from e

        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise TransientLookupError(self.base_url, f"response for {label!r} has no results array")

        for obj in results:
            try:
                c = Candidate.from_json(obj)
            except ValueError as e:
                raise TransientLookupError(self.base_url, f"malformed result for {label!r}: {e}") from e
            logger.debug(
                "%s(%s) returned: d%s ~%s [%s] %s %s",
                self._TAG, label, c.dist, c.matched_label, c.canon_label, c.name, c.page_id,
            )
            yield c

    @abstractmethod
    def query(self, label: str) -> List[Candidate]:
        """Candidates worth keeping from the service's answer for *label*."""


class FuzzyLabelClient(_LookupClient):
    """
    Fuzzy label search tolerant to wrong capitalization, omitted
    interpunction and typos (https://github.com/brmson/label-lookup/).
    """

    _TAG = "label-lookup"

    def query(self, label: str) -> List[Candidate]:
        """
        Keep every exact match, or the single nearest fuzzy match when no
        exact match came before it.
        """
        # Parse everything first so a malformed tail fails the whole call.
        returned = list(self._results(label))

        kept: List[Candidate] = []
        for c in returned:
            if c.is_exact:
                # duplicates like "U.S. Navy" and "U.S. navy" come back adjacent
                if not kept or kept[-1].name != c.name:
                    kept.append(c)
            elif not kept:
                kept.append(c)
        return kept


class ProbabilityLookupClient(_LookupClient):
    """
    Probability-weighted lookup; results come ordered by P(article | label),
    so only the first one is kept.
    """

    _TAG = "prob-lookup"

    def query(self, label: str) -> List[Candidate]:
        returned = list(self._results(label))
        return returned[:1]


def merge_results(fuzzy: List[Candidate], probs: List[Candidate]) -> List[Candidate]:
    """
    Attach the probability service's match probability to the fuzzy results.

    Fuzzy results take priority; a fuzzy candidate gets the probability of
    the top probability-service pick when that pick's canonical label is the
    candidate's article name. Without fuzzy results the probability-service
    results are returned as they are.
    """
    if not fuzzy:
        return probs
    if not probs:
        return list(fuzzy)
    top = probs[0]
    return [c.with_prob(top.prob) if top.canon_label == c.name else c for c in fuzzy]
