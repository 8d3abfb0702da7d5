"""
Fetch markdown documents over HTTP.
"""

from __future__ import annotations

import logging

import httpx

from .exceptions import FetchError

logger = logging.getLogger("scopegen-outline")

DEFAULT_TIMEOUT = 10.0


def validate_url(url: str) -> httpx.URL:
    """
    Parse a document URL, accepting only http and https.

    Raises:
        FetchError: If the URL is malformed or uses another scheme
    """
    try:
        parsed = httpx.URL(url.strip())
    except httpx.InvalidURL as e:
        raise FetchError(f"Invalid URL '{url}': {e}") from None

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise FetchError(
            f"Invalid URL '{url}'. Expected an http:// or https:// address."
        )
    return parsed


async def fetch_markdown(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """
    Fetch a markdown document.

    Args:
        url: http(s) URL of the document
        timeout: Request timeout in seconds

    Returns:
        The document body as text

    Raises:
        FetchError: If the URL is invalid, the document is missing, the
            server returns an error status, or the request fails
    """
    parsed = validate_url(url)
    logger.debug(f"🌐 Fetching markdown from {parsed}")

    try:
        async with httpx.AsyncClient(follow_redirects=True) as client:
            response = await client.get(str(parsed), timeout=timeout)

            if response.status_code == 404:
                raise FetchError(
                    f"Document not found: {parsed}",
                    details={"url": str(parsed), "status_code": 404},
                )

            response.raise_for_status()
            text = response.text

    except httpx.TimeoutException:
        raise FetchError(
            f"Timed out after {timeout}s fetching {parsed}"
        ) from None
    except httpx.HTTPStatusError as e:
        raise FetchError(
            f"Server returned HTTP {e.response.status_code}: {e.response.reason_phrase}",
            details={"url": str(parsed), "status_code": e.response.status_code},
        ) from None
    except httpx.RequestError as e:
        raise FetchError(f"Failed to connect to {parsed.host}: {e}") from None

    logger.debug(f"🌐 Fetched {len(text)} characters from {parsed}")
    return text
