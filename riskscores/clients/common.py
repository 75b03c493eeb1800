"""Shared HTTP utilities for the risk data clients."""

import requests
from ..env import request_timeout
from ..logger import get_logger
from ..retry import RetryError, exponential_backoff, should_retry_http_status

logger = get_logger()


class RetryableStatusError(requests.exceptions.HTTPError):
    """HTTP response with a status worth retrying (5xx, 429, 408)."""
    pass


RETRY_ON = (requests.exceptions.Timeout, requests.exceptions.ConnectionError, RetryableStatusError)
MAX_RETRIES = 3
BASE_DELAY = 1.0


def _send(method: str, url: str, **kwargs):
    logger.record_api_call()
    resp = requests.request(method, url, timeout=request_timeout(), **kwargs)
    if should_retry_http_status(resp.status_code):
        raise RetryableStatusError(f"{resp.status_code} from {url}", response=resp)
    return resp


def _request_with_retry(method: str, url: str, source: str, **kwargs):
    """Send a request, retrying transient transport errors and statuses."""
    name = source.capitalize()

    def log_retry(attempt, error, delay):
        logger.record_request_retry(source)
        logger.warning(f"{name} request retrying", url=url, attempt=attempt, delay=delay, error=str(error))

    send = exponential_backoff(RETRY_ON, max_retries=MAX_RETRIES, base_delay=BASE_DELAY, on_retry=log_retry)(_send)
    return send(method, url, **kwargs)


def fetch_json(method: str, url: str, source: str, **kwargs):
    """Fetch a URL and decode its JSON body with standardized error handling.

    Args:
        method: HTTP method ('GET' or 'POST')
        url: The URL to fetch
        source: The data source name for logging (e.g., 'subgraph', 'ydaemon')
        **kwargs: Passed through to requests (params, json, ...)

    Returns:
        Decoded JSON body

    Raises:
        ValueError: On any HTTP error, timeout, request failure or non-JSON body
    """
    name = source.capitalize()
    logger.record_request_attempt(source)
    try:
        resp = _request_with_retry(method, url, source, **kwargs)
        resp.raise_for_status()
        data = resp.json()
    except RetryError as e:
        cause = e.__cause__
        if isinstance(cause, RetryableStatusError):
            status = cause.response.status_code
            logger.record_request_failure(source, f"HTTPError_{status}")
            logger.error(f"{name} request failed after retries", url=url, status=status)
            raise ValueError(f"{name} request failed ({status}): {url}")
        if isinstance(cause, requests.exceptions.Timeout):
            logger.record_request_failure(source, "Timeout")
            logger.warning(f"{name} request timed out", url=url)
            raise ValueError(f"{name} request timed out. Try again later.")
        logger.record_request_failure(source, "ConnectionError")
        logger.error(f"{name} connection failed", url=url, error=str(cause))
        raise ValueError(f"{name} request error: {cause}")
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "HTTPError"
        logger.record_request_failure(source, f"HTTPError_{status}")
        if status == 404:
            logger.warning(f"{name} URL not found", url=url, status=404)
            raise ValueError(f"{name} URL not found (404): {url}")
        logger.error(f"{name} request failed", url=url, status=status)
        raise ValueError(f"{name} request failed ({status}): {url}")
    except requests.exceptions.JSONDecodeError:
        logger.record_request_failure(source, "InvalidJSON")
        logger.error(f"{name} returned a non-JSON body", url=url)
        raise ValueError(f"{name} returned invalid JSON: {url}")
    except requests.exceptions.RequestException as e:
        logger.record_request_failure(source, "RequestException")
        logger.error(f"{name} request error", url=url, error=str(e))
        raise ValueError(f"{name} request error: {e}")

    logger.record_request_success(source)
    logger.debug(f"{name} request succeeded", url=url)
    return data
