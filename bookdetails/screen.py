"""Book details screen: state, text rendering and actions."""
import logging
from typing import Optional
from tabulate import tabulate
from bookdetails.loader import DetailsViewModel
from bookdetails.models import Resource, CatalogRecord
from bookdetails.navigation import ReaderScreens
from bookdetails.parse import html_to_text
from bookdetails.save import build_saved_book, save_to_collection

logger = logging.getLogger(__name__)

TITLE = "Book Details"
LOADING_TEXT = "Loading Book Details"


class BookDetailsScreen:
    """Shows one catalog record and offers Save / Cancel."""

    def __init__(self, navigator, book_id: str, view_model: DetailsViewModel, session, collection):
        self.navigator = navigator
        self.book_id = book_id
        self.view_model = view_model
        self.session = session
        self.collection = collection
        self.book_info = Resource.loading()

    async def load(self) -> Resource:
        self.book_info = await self.view_model.get_book_details(self.book_id)
        if self.book_info.message:
            logger.info(f"Details unavailable: {self.book_info.message}")
        return self.book_info

    @property
    def is_loading(self) -> bool:
        # An error carries no data, so it keeps showing the loading state
        return self.book_info.data is None

    @property
    def record(self) -> Optional[CatalogRecord]:
        return self.book_info.data

    def render(self) -> str:
        if self.is_loading:
            return f"{TITLE}\n\n{LOADING_TEXT}"
        return f"{TITLE}\n\n{render_details(self.record)}\n\n[ Save ]   [ Cancel ]"

    def on_back(self):
        self.navigator.navigate(ReaderScreens.SearchScreen.value)

    def on_cancel(self):
        self.navigator.pop_back_stack()

    def on_save(self) -> bool:
        """Persist the shown record. Does nothing until details are loaded."""
        if self.is_loading:
            return False
        book = build_saved_book(self.record, self.session)
        return save_to_collection(book, self.collection, self.navigator)


def render_details(record: CatalogRecord) -> str:
    """Text view of a record with the same fallbacks the card uses."""
    rows = [
        ["Image", record.thumbnail or ""],
        ["Title", record.title or "No Title"],
        ["Authors", record.authors_str],
        ["Description", record.description or "No Description"],
    ]
    table = tabulate(rows, tablefmt="plain", maxcolwidths=[None, 70])
    return f"{table}\n\n{html_to_text(record.description)}"
