"""Async HTTP client for volume lookups."""
import httpx
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class AsyncGoogleBooksClient:
    """Async client used by the details loader."""

    BASE_URL = "https://www.googleapis.com/books/v1/volumes"

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize async client.

        Args:
            api_key: Optional API key
            timeout: Request timeout; None waits indefinitely
            transport: Optional transport override
        """
        self.api_key = api_key
        self.timeout = timeout

        # Create async HTTP client
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def get_volume(self, volume_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch one volume by id.

        Args:
            volume_id: Google Books volume id

        Returns:
            Volume JSON or None
        """
        params = {}
        if self.api_key:
            params["key"] = self.api_key

        try:
            logger.info(f"Async request: volume {volume_id}")
            response = await self.client.get(f"{self.BASE_URL}/{volume_id}", params=params)
        except httpx.HTTPError as e:
            logger.error(f"Async request failed: {e}")
            return None

        if response.status_code != 200:
            logger.warning(f"Status {response.status_code} for volume: {volume_id}")
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON for volume {volume_id}: {e}")
            return None

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
