from __future__ import annotations
import os
from dataclasses import dataclass, field


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


@dataclass
class Settings:
    """
    Centralised runtime configuration pulled from environment variables.
    """

    # ---- Lookup services ----------------------------------------------
    LABEL_LOOKUP_URL: str = field(
        default_factory=lambda: os.getenv("LABEL_LOOKUP_URL", "http://dbp-labels.ailao.eu:5000")
    )
    PROB_LOOKUP_URL: str = field(
        default_factory=lambda: os.getenv("PROB_LOOKUP_URL", "http://localhost:5001")
    )
    LOOKUP_TIMEOUT_S: float = field(default_factory=lambda: _env_float("LOOKUP_TIMEOUT_S", 10))

    LOOKUP_RETRY_ATTEMPTS: int = field(default_factory=lambda: _env_int("LOOKUP_RETRY_ATTEMPTS", 5))
    LOOKUP_RETRY_MIN_WAIT_S: float = field(
        default_factory=lambda: _env_float("LOOKUP_RETRY_MIN_WAIT_S", 1)
    )
    LOOKUP_RETRY_MAX_WAIT_S: float = field(
        default_factory=lambda: _env_float("LOOKUP_RETRY_MAX_WAIT_S", 30)
    )

    # ---- Knowledge graph ----------------------------------------------
    DBPEDIA_ENDPOINT: str = field(
        default_factory=lambda: os.getenv("DBPEDIA_ENDPOINT", "https://dbpedia.org/sparql")
    )
    SPARQL_TIMEOUT_S: int = field(default_factory=lambda: _env_int("SPARQL_TIMEOUT_S", 30))

    # -------------------------------------------------------------------
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
