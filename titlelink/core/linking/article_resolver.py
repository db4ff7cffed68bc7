from __future__ import annotations

import logging
import math
import re
from typing import Any, List, Protocol, Sequence, Tuple
from urllib.parse import quote

from ...errors import GraphQueryError
from ...models import Candidate, ResolvedArticle

logger = logging.getLogger(__name__)

RESOURCE_PREFIX = "http://dbpedia.org/resource/"


class GraphQueryExecutor(Protocol):
    def raw_query(
        self, query: str, variables: Sequence[str], offset: int = 0
    ) -> List[Tuple[Any, ...]]:
        ...


# characters SPARQL does not allow inside <...>
_IRI_ILLEGAL = re.compile(r'[\x00-\x20<>"{}|^`\\]')


def iri(uri: str) -> str:
    """*uri* as a SPARQL IRI reference, percent-encoding illegal characters."""
    return "<" + _IRI_ILLEGAL.sub(lambda m: quote(m.group()), uri) + ">"


def article_query(name: str) -> str:
    """
    SPARQL for the canonical articles behind resource *name*: the resource
    itself, its redirect target, or its disambiguation targets.
    """
    res = iri(RESOURCE_PREFIX + name)
    return (
        "SELECT ?pageID ?label ?res WHERE {\n"
        "{\n"
        # (A) the resource itself
        f"  BIND({res} AS ?res)\n"
        "} UNION {\n"
        # (B) redirect target
        f"  BIND({res} AS ?redir)\n"
        "  ?redir dbo:wikiPageRedirects ?res .\n"
        "} UNION {\n"
        # (C) disambiguation targets
        f"  BIND({res} AS ?disamb)\n"
        "  ?disamb dbo:wikiPageDisambiguates ?res .\n"
        "}\n"
        # under (B) and (C), (A) still yields the redirect/disambiguation
        # page itself; it is told apart by having a target of its own
        "OPTIONAL { ?res dbo:wikiPageRedirects ?redirTarget . }\n"
        "OPTIONAL { ?res dbo:wikiPageDisambiguates ?disambTarget . }\n"
        "?res dbo:wikiPageID ?pageID .\n"
        "?res rdfs:label ?label .\n"
        "FILTER ( !BOUND(?redirTarget) )\n"
        "FILTER ( !BOUND(?disambTarget) )\n"
        "FILTER ( LANG(?label) = 'en' )\n"
        "}"
    )


def count_query(resource_uri: str) -> str:
    """SPARQL counting the triples *resource_uri* takes part in, either side."""
    res = iri(resource_uri)
    return (
        "SELECT (COUNT(*) AS ?c) WHERE {\n"
        f"  {{ ?a ?b {res} }}\n"
        "  UNION\n"
        f"  {{ {res} ?a ?b }}\n"
        "}"
    )


class ArticleResolver:
    """
    Resolve lookup candidates to canonical DBpedia articles, passing through
    redirects and disambiguation pages.
    """

    def __init__(self, executor: GraphQueryExecutor) -> None:
        self.executor = executor

    def connectivity(self, resource_uri: str) -> int:
        """Number of relations (in and out) the resource partakes in."""
        rows = self.executor.raw_query(count_query(resource_uri), ["c"])
        if not rows or not isinstance(rows[0][0], int):
            raise GraphQueryError(f"no triple count returned for {resource_uri}")
        return rows[0][0]

    def score(self, resource_uri: str) -> float:
        """
        Prominence of the concept: log of its relation count, to keep it at
        least roughly normalized.
        """
        count = self.connectivity(resource_uri)
        # a resource returned by the article query has at least its pageID
        # and label triples; guard anyway so log() never sees zero
        return math.log(count) if count > 0 else 0.0

    def resolve(self, base: Candidate) -> List[ResolvedArticle]:
        rows = self.executor.raw_query(article_query(base.name), ["pageID", "label", "res"])

        results: List[ResolvedArticle] = []
        for page_id, label, res in rows:
            # http://dbpedia.org/resource/-al is a valid IRI, but it gets
            # mangled on its way back into a query; drop such rows
            if "/-" in res:
                logger.warning("Giving up on DBpedia %s", res)
                continue

            name = res[len(RESOURCE_PREFIX):] if res.startswith(RESOURCE_PREFIX) else res
            score = self.score(res)

            logger.debug("DBpedia %s: [[%s]] (%s)", base.name, label, score)
            results.append(
                ResolvedArticle.from_candidate(
                    base, page_id=int(page_id), name=name, label=label, score=score
                )
            )
        return results
