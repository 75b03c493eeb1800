"""
Backoff for the risk data API calls.

Only transport failures and throttling/server statuses are retried; a 4xx
answer is final and goes straight back to the caller.
"""

import time
import functools
from typing import Callable, Iterator, Optional, Tuple, Type

RETRYABLE_STATUSES = frozenset({408, 429, 500, 502, 503, 504})


class RetryError(Exception):
    """The last failure after every attempt was used up; see __cause__."""
    pass


def should_retry_http_status(status_code: int) -> bool:
    return status_code in RETRYABLE_STATUSES


def backoff_delays(max_retries: int, base_delay: float, max_delay: float) -> Iterator[float]:
    """Yield the sleep before each retry: base, 2x base, 4x base ... capped."""
    for attempt in range(max_retries):
        yield min(base_delay * 2 ** attempt, max_delay)


def exponential_backoff(
    retry_on: Tuple[Type[Exception], ...],
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    on_retry: Optional[Callable[[int, Exception, float], None]] = None,
):
    """
    Retry the decorated call when it raises one of retry_on.

    on_retry(attempt, error, delay) runs before each sleep, attempt
    counting from 1. Once retries run out, RetryError is raised from the
    last error.
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            delays = backoff_delays(max_retries, base_delay, max_delay)
            attempt = 0
            while True:
                try:
                    return func(*args, **kwargs)
                except retry_on as e:
                    delay = next(delays, None)
                    if delay is None:
                        raise RetryError(f"Failed after {attempt + 1} attempts: {e}") from e
                    attempt += 1
                    if on_retry:
                        on_retry(attempt, e, delay)
                    time.sleep(delay)

        return wrapper
    return decorator
