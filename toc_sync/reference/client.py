"""
Reference Client — fetches the reference document.

One GET per run. No retry and no timeout: a hung request blocks the run.
"""

import logging
from typing import Optional

import httpx

from toc_sync.errors import ReferenceFetchError

logger = logging.getLogger(__name__)


class ReferenceClient:
    """Fetches the reference page as text."""

    def __init__(self, transport: Optional[httpx.BaseTransport] = None):
        self._transport = transport

    def fetch(self, url: str) -> str:
        """GET `url` and return its body. Raises ReferenceFetchError on any failure."""
        logger.info(f"Fetching current interface numbers from {url}")
        try:
            with httpx.Client(
                transport=self._transport,
                timeout=None,
                follow_redirects=True,
            ) as client:
                response = client.get(url)
                response.raise_for_status()
                return response.text
        except httpx.HTTPStatusError as e:
            raise ReferenceFetchError(
                url, f"{e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise ReferenceFetchError(url, str(e) or type(e).__name__) from e
