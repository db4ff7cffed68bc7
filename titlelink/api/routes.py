from __future__ import annotations

from http import HTTPStatus

from flask import current_app, g, request, jsonify

from . import api_bp
from ..config import Settings
from ..core.linking.dbpedia_titles import DBpediaTitles
from ..errors import GraphQueryError, LookupUnavailableError


def _app_settings() -> Settings:
    return Settings(**{
        k: current_app.config[k]
        for k in Settings.__dataclass_fields__
        if k in current_app.config
    })


def _titles() -> DBpediaTitles:
    # one resolver per request; its HTTP sessions never cross request threads
    if "dbpedia_titles" not in g:
        factory = current_app.extensions.get("dbpedia_titles", DBpediaTitles)
        g.dbpedia_titles = factory(_app_settings())
    return g.dbpedia_titles


@api_bp.route("/titles", methods=["GET"])
def titles():
    """
    Query: ?q=usa

    Response:
    {
      "title": "usa",
      "articles": [
          { "pageID": 3434750, "name": "United_States", "label": "United States",
            "matchedLabel": "USA", "canonLabel": "United States",
            "dist": 0.0, "score": 10.8, "prob": 0.93 },
          ...
      ]
    }
    """
    title = (request.args.get("q") or "").strip()
    if not title:
        return jsonify({"error": "query string must contain a non-empty 'q'"}), HTTPStatus.BAD_REQUEST

    try:
        articles = _titles().query(title)
    except LookupUnavailableError as e:
        return jsonify({"error": str(e)}), HTTPStatus.SERVICE_UNAVAILABLE
    except GraphQueryError as e:
        return jsonify({"error": str(e)}), HTTPStatus.BAD_GATEWAY

    return jsonify({"title": title, "articles": [a.to_dict() for a in articles]}), HTTPStatus.OK
