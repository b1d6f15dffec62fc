"""Save a loaded catalog record to the user's collection."""
import logging
from bookdetails.models import CatalogRecord, SavedBook
from bookdetails.parse import to_saved_book

logger = logging.getLogger(__name__)


def build_saved_book(record: CatalogRecord, session) -> SavedBook:
    """Map the record for whoever is signed in; no check that anyone is."""
    return to_saved_book(record, session.current_user_id)


def save_to_collection(book: SavedBook, collection, navigator) -> bool:
    """
    Insert the book, then store its generated id on the document.

    Navigates back once both writes succeed. A failed update is only
    logged and the navigator is left alone. Insert errors propagate.

    Args:
        book: Book to persist
        collection: Target collection (``add`` / ``update``)
        navigator: Object with ``pop_back_stack()``

    Returns:
        True if both writes succeeded
    """
    doc_id = collection.add(book.to_document())
    book.id = doc_id

    if not collection.update(doc_id, {"id": doc_id}):
        logger.warning(f"Saved book {doc_id} but could not store its id")
        return False

    logger.info(f"Saved book {doc_id} ({book.google_book_id})")
    navigator.pop_back_stack()
    return True
