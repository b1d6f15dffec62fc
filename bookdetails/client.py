"""HTTP client for Google Books API."""
import requests
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class GoogleBooksClient:
    """Blocking client for the volumes endpoints. One attempt per call."""

    BASE_URL = "https://www.googleapis.com/books/v1/volumes"

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: int = 10,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize Google Books API client.

        Args:
            api_key: Optional API key (increases rate limits)
            timeout: Request timeout in seconds
            session: Session to reuse; a new one is created if omitted
        """
        self.api_key = api_key
        self.timeout = timeout

        # Create session for connection pooling
        self.session = session or requests.Session()

    def search(self, query: str, max_results: int = 10) -> Optional[Dict[str, Any]]:
        """
        Search for books.

        Args:
            query: Search query string
            max_results: Maximum results to return (1-40)

        Returns:
            API response JSON or None if the request failed
        """
        params = {
            "q": query,
            "maxResults": min(max_results, 40)  # API limit
        }
        return self._get(self.BASE_URL, params)

    def get_volume(self, volume_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a single volume by id."""
        return self._get(f"{self.BASE_URL}/{volume_id}", {})

    def _get(self, url: str, params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Make a single GET request.

        Args:
            url: Request URL
            params: Query parameters

        Returns:
            Response JSON or None on any failure
        """
        if self.api_key:
            params["key"] = self.api_key

        try:
            logger.info(f"Request: {url}")
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.Timeout:
            logger.warning(f"Timeout: {url}")
            return None
        except requests.exceptions.RequestException as e:
            logger.warning(f"Connection error: {e}")
            return None

        if response.status_code == 200:
            logger.info(f"Success: {response.status_code}")
            try:
                return response.json()
            except ValueError as e:
                logger.error(f"Invalid JSON from {url}: {e}")
                return None

        if response.status_code >= 500 or response.status_code == 429:
            logger.warning(f"Server unavailable ({response.status_code}): {url}")
        else:
            logger.error(f"Client error ({response.status_code}): {response.text}")
        return None

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
