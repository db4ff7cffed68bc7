from .dbpedia_client import DBpediaClient

__all__ = ["DBpediaClient"]
