"""Shared async HTTP client utilities for the installer.

Provides a thin wrapper around ``httpx.AsyncClient`` with standardised
timeouts, user-agent headers and error handling, so the version index and
archive downloads behave the same way and are easy to mock in tests.

Unlike a best-effort scanner, the installer cannot continue without a
response, so every failure is raised as ``NetworkError``.
"""

from __future__ import annotations

import logging

import httpx

from metaschemapy import __version__
from metaschemapy.exceptions import NetworkError

logger = logging.getLogger(__name__)

# Timeout for all installer HTTP requests (seconds).
DEFAULT_TIMEOUT: float = 60.0

USER_AGENT: str = f"metaschema-py/{__version__}"


async def _get(url: str, timeout: float) -> httpx.Response:
    try:
        async with httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
        ) as client:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        logger.warning("HTTP %d from %s", status, url)
        raise NetworkError(
            f"HTTP error {status} fetching {url}", url=url, status_code=status
        ) from exc
    except httpx.TimeoutException as exc:
        logger.warning("Timeout fetching %s", url)
        raise NetworkError(f"Timed out fetching {url}", url=url) from exc
    except httpx.RequestError as exc:
        logger.warning("Request error for %s: %s", url, exc)
        raise NetworkError(f"Request to {url} failed: {exc}", url=url) from exc


async def fetch_text(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Fetch a URL and return the response body as text.

    Raises:
        NetworkError: On non-2xx responses, timeouts or transport errors.
    """
    resp = await _get(url, timeout)
    return resp.text


async def fetch_bytes(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    """Fetch a URL and return the raw response body.

    Raises:
        NetworkError: On non-2xx responses, timeouts or transport errors.
    """
    resp = await _get(url, timeout)
    logger.debug("Fetched %d bytes from %s", len(resp.content), url)
    return resp.content
