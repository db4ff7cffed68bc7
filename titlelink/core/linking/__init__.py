from .article_resolver import ArticleResolver
from .dbpedia_titles import DBpediaTitles
from .lookup import FuzzyLabelClient, ProbabilityLookupClient, merge_results
from .titles import capitalize_title, cooked_titles

__all__ = [
    "ArticleResolver",
    "DBpediaTitles",
    "FuzzyLabelClient",
    "ProbabilityLookupClient",
    "capitalize_title",
    "cooked_titles",
    "merge_results",
]
