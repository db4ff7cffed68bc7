from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from SPARQLWrapper import SPARQLWrapper, JSON
from SPARQLWrapper.SPARQLExceptions import SPARQLWrapperException

from ...config import Settings
from ...errors import GraphQueryError

logger = logging.getLogger(__name__)

Value = Union[int, str, None]

_PREFIXES = (
    "PREFIX dbo: <http://dbpedia.org/ontology/>\n"
    "PREFIX rdfs: <http://www.w3.org/2000/01/rdf-schema#>\n"
)

_XSD = "http://www.w3.org/2001/XMLSchema#"
_INT_TYPES = {
    _XSD + t
    for t in (
        "integer", "int", "long", "short", "byte",
        "nonNegativeInteger", "positiveInteger", "unsignedInt", "unsignedLong",
    )
}


def _convert(binding: Optional[Dict[str, Any]]) -> Value:
    if binding is None:
        return None
    value = binding["value"]
    if binding.get("type") in ("literal", "typed-literal") and binding.get("datatype") in _INT_TYPES:
        return int(value)
    return value


class DBpediaClient:
    """
    Thin wrapper for a DBpedia SPARQL endpoint.
    """

    _UA = "titlelink/0.1 (DBpedia titles resolver)"

    def __init__(
        self,
        *,
        endpoint: str | None = None,
        timeout_s: int | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or Settings()
        self.endpoint = endpoint or settings.DBPEDIA_ENDPOINT
        self.timeout_s = timeout_s if timeout_s is not None else settings.SPARQL_TIMEOUT_S

    def _sparql(self) -> SPARQLWrapper:
        # SPARQLWrapper holds the query on the instance; never share one across calls
        sparql = SPARQLWrapper(self.endpoint)
        sparql.setReturnFormat(JSON)
        sparql.setTimeout(self.timeout_s)
        sparql.addCustomHttpHeader("User-Agent", self._UA)
        sparql.addCustomHttpHeader("Accept", "application/sparql-results+json")
        return sparql

    # ------------------------------------------------------------------ #
    def _q(self, q: str) -> List[Dict[str, Any]]:
        try:
            sparql = self._sparql()
            sparql.setQuery(q)
            return sparql.queryAndConvert()["results"]["bindings"]
        except (SPARQLWrapperException, OSError, ValueError) as exc:
            raise GraphQueryError(f"SPARQL query against {self.endpoint} failed: {exc}") from exc
        except (KeyError, TypeError) as exc:
            raise GraphQueryError(f"unexpected SPARQL result shape from {self.endpoint}") from exc

    # ------------------------------------------------------------------ #
    def raw_query(
        self, query: str, variables: Sequence[str], offset: int = 0
    ) -> List[Tuple[Value, ...]]:
        """
        Run a SELECT *query* and return one tuple per result row, holding the
        values of *variables* in order.

        xsd integer literals come back as ``int``, other literals and IRIs
        as ``str``, unbound variables as ``None``.
        """
        q = _PREFIXES + query
        if offset > 0:
            q += f"\nOFFSET {offset}"
        logger.debug("executing sparql query: %s", q)

        rows = self._q(q)
        try:
            return [tuple(_convert(row.get(var)) for var in variables) for row in rows]
        except (KeyError, ValueError) as exc:
            raise GraphQueryError(f"malformed SPARQL binding from {self.endpoint}: {exc}") from exc
