from typing import Any, Optional

import requests

from moviefetch.config.settings import settings
from moviefetch.utils.logger import get_logger

logger = get_logger(__name__)

GENERIC_FAILURE_MESSAGE = "Something went wrong"


class FetchError(Exception):
    """Transport, status or parse failure; str(exc) is shown to the user."""
    pass


def get_movies_payload(url: Optional[str] = None) -> Any:
    """GET the read endpoint and return its decoded JSON body.

    Raises FetchError for transport failures, non-OK statuses (with the generic message) and bad JSON.
    """
    url = url or settings.MOVIES_READ_URL
    try:
        resp = requests.get(url, timeout=settings.REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise FetchError(str(e) or GENERIC_FAILURE_MESSAGE) from e
    logger.debug("GET %s -> %s", url, resp.status_code)
    if not resp.ok:
        raise FetchError(GENERIC_FAILURE_MESSAGE)
    try:
        return resp.json()
    except ValueError as e:
        raise FetchError(f"Invalid JSON from {url}: {e}") from e


def post_movie(body: dict, url: Optional[str] = None) -> Any:
    """POST a movie body as JSON to the write endpoint and return whatever JSON came back (or None)."""
    url = url or settings.MOVIES_WRITE_URL
    try:
        resp = requests.post(
            url,
            json=body,
            headers=settings.json_headers,
            timeout=settings.REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        raise FetchError(str(e) or GENERIC_FAILURE_MESSAGE) from e
    logger.debug("POST %s -> %s", url, resp.status_code)
    if not resp.ok:
        raise FetchError(GENERIC_FAILURE_MESSAGE)
    try:
        return resp.json()
    except ValueError:
        return None
