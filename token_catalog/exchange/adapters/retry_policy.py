from __future__ import annotations

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter

RETRYABLE_ERRORS = (TimeoutError, httpx.TimeoutException, httpx.TransportError)


def default_retry(attempts: int = 3):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_exponential_jitter(initial=0.2, max=5.0),
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
    )
