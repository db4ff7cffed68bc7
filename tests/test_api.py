"""
Tests for the Flask API.
"""

from unittest.mock import MagicMock

import pytest

from titlelink import create_app
from titlelink.core.linking.dbpedia_titles import DBpediaTitles
from titlelink.errors import GraphQueryError, LookupUnavailableError
from titlelink.models import ResolvedArticle


@pytest.fixture
def titles():
    return MagicMock()


@pytest.fixture
def client(settings, titles):
    app = create_app(settings)
    app.config["TESTING"] = True
    app.extensions["dbpedia_titles"] = lambda settings: titles
    return app.test_client()


def test_resolves_title(client, titles):
    titles.query.return_value = [
        ResolvedArticle(1234, "United_States", "United States", "USA", "USA", 0.0, 10.8, 0.9),
    ]
    resp = client.get("/api/titles", query_string={"q": " usa "})
    assert resp.status_code == 200
    assert resp.get_json() == {
        "title": "usa",
        "articles": [{
            "pageID": 1234, "name": "United_States", "label": "United States",
            "matchedLabel": "USA", "canonLabel": "USA", "dist": 0.0, "score": 10.8, "prob": 0.9,
        }],
    }
    titles.query.assert_called_once_with("usa")


def test_not_found_is_empty_list(client, titles):
    titles.query.return_value = []
    resp = client.get("/api/titles?q=xyzzy")
    assert resp.status_code == 200
    assert resp.get_json()["articles"] == []


@pytest.mark.parametrize("url", ["/api/titles", "/api/titles?q=", "/api/titles?q=%20%20"])
def test_missing_title(client, titles, url):
    resp = client.get(url)
    assert resp.status_code == 400
    assert "error" in resp.get_json()
    titles.query.assert_not_called()


def test_lookup_unavailable(client, titles):
    titles.query.side_effect = LookupUnavailableError("usa", 5)
    resp = client.get("/api/titles?q=usa")
    assert resp.status_code == 503
    assert "5 attempts" in resp.get_json()["error"]


def test_graph_failure(client, titles):
    titles.query.side_effect = GraphQueryError("endpoint down")
    resp = client.get("/api/titles?q=usa")
    assert resp.status_code == 502


def test_resolver_built_from_app_settings(settings):
    app = create_app(settings)
    with app.app_context():
        from titlelink.api.routes import _titles

        titles = _titles()
        assert isinstance(titles, DBpediaTitles)
        assert titles.fuzzy.base_url == "http://labels.test:5000"
        assert titles.probs.base_url == "http://probs.test:5001"
        assert _titles() is titles


def test_each_request_gets_its_own_resolver(settings):
    built = []

    def factory(s):
        titles = MagicMock()
        titles.query.return_value = []
        built.append((s, titles))
        return titles

    app = create_app(settings)
    app.extensions["dbpedia_titles"] = factory
    client = app.test_client()
    client.get("/api/titles?q=usa")
    client.get("/api/titles?q=usa")

    assert len(built) == 2
    assert built[0][1] is not built[1][1]
    assert built[0][0].LABEL_LOOKUP_URL == "http://labels.test:5000"
