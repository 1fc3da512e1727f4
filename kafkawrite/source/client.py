"""
Client for reading raw record data from the upstream REST source.
"""

import logging
from typing import Optional

import httpx

from kafkawrite.exceptions import SourceFetchError
from .config import SourceConfig

logger = logging.getLogger(__name__)


class SourceReader:
    """Performs a single blocking GET against the configured source."""

    def __init__(self, config: Optional[SourceConfig] = None, transport: Optional[httpx.BaseTransport] = None):
        """
        Initialize the source reader.

        Args:
            config: Source configuration, uses default if None
            transport: Transport override, mainly for tests
        """
        self.config = config or SourceConfig()
        self._transport = transport

    def fetch(self) -> bytes:
        """
        Fetch the raw response body from the source.

        Returns:
            Response body bytes

        Raises:
            SourceFetchError: On any transport failure or a non-2xx status
        """
        logger.info(f"Fetching records from {self.config.url}")

        with httpx.Client(
            timeout=self.config.timeout,
            transport=self._transport or httpx.HTTPTransport(retries=0),
            headers=self.config.headers,
        ) as client:
            try:
                response = client.get(self.config.url)
            except httpx.HTTPError as e:
                logger.error(f"Request failed for {self.config.url}: {e}")
                raise SourceFetchError(f"Couldn't read source {self.config.url}: {e}") from e

            if not response.is_success:
                logger.error(f"HTTP error from {self.config.url}: {response.status_code}")
                raise SourceFetchError(
                    f"Couldn't read source: response code {response.status_code}",
                    status_code=response.status_code,
                )

            body = response.content

        logger.info(f"Fetched {len(body)} bytes from source")
        return body


def fetch(config: Optional[SourceConfig] = None) -> bytes:
    """Convenience wrapper: fetch once with a fresh reader."""
    return SourceReader(config).fetch()
