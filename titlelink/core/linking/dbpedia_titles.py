from __future__ import annotations

import logging
from typing import Callable, Iterable, List

from tenacity import RetryError

from ...config import Settings
from ...errors import LookupUnavailableError
from ...infrastructure.kg.dbpedia_client import DBpediaClient
from ...models import Candidate, ResolvedArticle
from ...retry import lookup_retrying
from .article_resolver import ArticleResolver, GraphQueryExecutor
from .lookup import FuzzyLabelClient, ProbabilityLookupClient, merge_results
from .titles import cooked_titles

logger = logging.getLogger(__name__)


class DBpediaTitles:
    """
    Map a title (a mention taken from a question or a document) to the
    enwiki articles it most likely names.

    Each title form is looked up in the fuzzy label-lookup service and the
    probability lookup service, the merged candidates are resolved against
    DBpedia, and the first title form resolving to anything wins.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        executor: GraphQueryExecutor | None = None,
        fuzzy: FuzzyLabelClient | None = None,
        probs: ProbabilityLookupClient | None = None,
        title_forms: Callable[[str], Iterable[str]] = cooked_titles,
    ) -> None:
        self.settings = settings or Settings()
        self.fuzzy = fuzzy or FuzzyLabelClient(
            self.settings.LABEL_LOOKUP_URL, timeout_s=self.settings.LOOKUP_TIMEOUT_S
        )
        self.probs = probs or ProbabilityLookupClient(
            self.settings.PROB_LOOKUP_URL, timeout_s=self.settings.LOOKUP_TIMEOUT_S
        )
        self.resolver = ArticleResolver(executor or DBpediaClient(settings=self.settings))
        self.title_forms = title_forms

    # ------------------------------------------------------------------ #
    def _lookup_once(self, title_form: str) -> List[Candidate]:
        entities = self.fuzzy.query(title_form)
        probs = self.probs.query(title_form)
        return merge_results(entities, probs)

    def lookup(self, title_form: str) -> List[Candidate]:
        """
        Merged lookup candidates for one title form, retrying both services
        together while they fail transiently.

        Raises LookupUnavailableError once the retries are used up.
        """
        retrying = lookup_retrying(self.settings)
        try:
            return retrying(self._lookup_once, title_form)
        except RetryError as e:
            last = e.last_attempt.exception()
            logger.error(
                "%s or %s label-lookup for %r failed %d times: %s",
                self.fuzzy.base_url, self.probs.base_url, title_form,
                e.last_attempt.attempt_number, last,
            )
            raise LookupUnavailableError(title_form, e.last_attempt.attempt_number) from last

    # ------------------------------------------------------------------ #
    def query(self, title: str) -> List[ResolvedArticle]:
        """Query for a given title, returning a list of articles."""
        for title_form in self.title_forms(title):
            results: List[ResolvedArticle] = []
            for candidate in self.lookup(title_form):
                results.extend(self.resolver.resolve(candidate))
            if results:
                logger.info("title %r resolved via %r to %d article(s)", title, title_form, len(results))
                return results
            logger.debug("title form %r resolved to nothing", title_form)
        return []
