"""Detail loader: fetch one catalog record into a Resource."""
import logging
from bookdetails.async_client import AsyncGoogleBooksClient
from bookdetails.models import Resource
from bookdetails.parse import parse_volume

logger = logging.getLogger(__name__)


class DetailsViewModel:
    """Reads a single volume for the details screen."""

    def __init__(self, client: AsyncGoogleBooksClient):
        self.client = client

    async def get_book_details(self, book_id: str) -> Resource:
        """
        Load a record by id.

        Returns:
            Resource.success with a CatalogRecord, or Resource.error with
            no data. Nothing is retried.
        """
        response = await self.client.get_volume(book_id)
        if response is None:
            return Resource.error(f"Could not load volume {book_id}")

        record = parse_volume(response)
        if record is None:
            return Resource.error(f"Malformed volume {book_id}")

        logger.info(f"Loaded details for {book_id}")
        return Resource.success(record)
