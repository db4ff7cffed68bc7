"""
Retry utilities for the lookup service calls.
"""

import logging

from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .config import Settings
from .errors import TransientLookupError

logger = logging.getLogger(__name__)


def lookup_retrying(settings: Settings) -> Retrying:
    """
    Retry controller for one round of label lookups.

    Retries on TransientLookupError only, with exponential backoff bounded by
    the LOOKUP_RETRY_* settings. Once attempts run out tenacity raises
    ``RetryError`` wrapping the last failure.

    Example:
        for attempt in lookup_retrying(settings):
            with attempt:
                candidates = client.query(title)
    """
    return Retrying(
        stop=stop_after_attempt(max(1, settings.LOOKUP_RETRY_ATTEMPTS)),
        wait=wait_exponential(
            multiplier=settings.LOOKUP_RETRY_MIN_WAIT_S,
            min=settings.LOOKUP_RETRY_MIN_WAIT_S,
            max=settings.LOOKUP_RETRY_MAX_WAIT_S,
        ),
        retry=retry_if_exception_type(TransientLookupError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )
