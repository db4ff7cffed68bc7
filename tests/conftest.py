"""
Pytest configuration and shared fixtures for titlelink tests.
"""

import re
from unittest.mock import MagicMock

import pytest
import requests

from titlelink.config import Settings

RESOURCE = "http://dbpedia.org/resource/"


def candidate_json(name, dist=0, prob=0.0, matched=None, canon=None, page_id=1):
    return {
        "matchedLabel": matched if matched is not None else name.replace("_", " "),
        "canonLabel": canon if canon is not None else name.replace("_", " "),
        "name": name,
        "dist": dist,
        "prob": prob,
        "pageID": page_id,
    }


def json_response(payload, status=200):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    return resp


class FakeLookupService:
    """Stands in for requests.Session; answers by the capitalised title in the URL."""

    def __init__(self, answers=None, failures=0):
        self.answers = answers or {}
        self.failures = failures
        self.urls = []
        self.headers = {}

    def get(self, url, params=None, timeout=None):
        self.urls.append(url)
        if self.failures:
            self.failures -= 1
            raise requests.ConnectionError("connection refused")
        title = url.rsplit("/search/", 1)[1]
        return json_response({"results": self.answers.get(title, [])})


class FakeGraph:
    """Graph query executor serving canned article rows and triple counts."""

    _RES = re.compile(r"BIND\(<" + re.escape(RESOURCE) + r"(.*?)> AS \?res\)")
    _COUNT = re.compile(r"\{ \?a \?b <(.*?)> \}")

    def __init__(self, articles=None, counts=None):
        self.articles = articles or {}
        self.counts = counts or {}
        self.queries = []

    def raw_query(self, query, variables, offset=0):
        self.queries.append((query, list(variables)))
        if "COUNT(*)" in query:
            uri = self._COUNT.search(query).group(1)
            return [(self.counts.get(uri, 1),)]
        name = self._RES.search(query).group(1)
        return list(self.articles.get(name, []))

    def count_queries(self):
        return [q for q, _ in self.queries if "COUNT(*)" in q]


@pytest.fixture
def settings():
    """Settings pointing at fake endpoints, with no waiting between retries."""
    return Settings(
        LABEL_LOOKUP_URL="http://labels.test:5000",
        PROB_LOOKUP_URL="http://probs.test:5001",
        DBPEDIA_ENDPOINT="http://sparql.test/sparql",
        LOOKUP_RETRY_ATTEMPTS=3,
        LOOKUP_RETRY_MIN_WAIT_S=0,
        LOOKUP_RETRY_MAX_WAIT_S=0,
    )


@pytest.fixture
def graph():
    return FakeGraph()
