"""Parse Google Books volumes and map them onto saved books."""
import html
import re
import logging
from typing import Dict, Any, List, Optional
from bookdetails.models import CatalogRecord, SavedBook

logger = logging.getLogger(__name__)

_HTML_BREAK_PATTERN = re.compile(r"</p>|<br\s*/?>", re.IGNORECASE)
_TAG_PATTERN = re.compile(r"<[^>]+>")

# Placeholder stored for values that are missing on the catalog record
NULL_PLACEHOLDER = "null"


def parse_volume(item: Dict[str, Any]) -> Optional[CatalogRecord]:
    """
    Parse a single volume item from Google Books API.

    Args:
        item: Volume resource (``id`` plus ``volumeInfo``)

    Returns:
        CatalogRecord or None if the item has no id
    """
    try:
        volume_info = item.get("volumeInfo") or {}

        book_id = item.get("id", "")
        if not book_id:
            return None

        # Missing fields stay None; the details view supplies its own fallbacks
        image_links = volume_info.get("imageLinks") or {}
        thumbnail = image_links.get("thumbnail") or image_links.get("smallThumbnail")

        return CatalogRecord(
            id=book_id,
            title=volume_info.get("title"),
            authors=volume_info.get("authors"),
            description=volume_info.get("description"),
            categories=volume_info.get("categories"),
            thumbnail=thumbnail,
            published_date=volume_info.get("publishedDate"),
            page_count=volume_info.get("pageCount")
        )
    except (AttributeError, TypeError) as e:
        logger.warning(f"Failed to parse volume: {e}")
        return None


def parse_search_response(response_json: Dict[str, Any]) -> List[CatalogRecord]:
    """
    Parse a volumes search response.

    Args:
        response_json: Complete API response JSON

    Returns:
        List of CatalogRecord objects (empty if no items found)
    """
    items = response_json.get("items", [])
    records = []

    for item in items:
        record = parse_volume(item)
        if record:
            records.append(record)

    return records


def html_to_text(value: Optional[str]) -> str:
    """Strip markup from a description, keeping paragraph breaks."""
    if not value:
        return ""
    working = _HTML_BREAK_PATTERN.sub("\n", value)
    working = _TAG_PATTERN.sub("", working)
    working = html.unescape(working)
    working = re.sub(r"\n{3,}", "\n\n", working)
    return working.strip()


def _flatten(values: Optional[List[str]]) -> str:
    if values is None:
        return NULL_PLACEHOLDER
    return "[" + ", ".join(str(v) for v in values) + "]"


def _as_string(value: Any) -> str:
    return NULL_PLACEHOLDER if value is None else str(value)


def to_saved_book(record: CatalogRecord, user_id: Optional[str]) -> SavedBook:
    """
    Map a catalog record onto the saved book schema.

    Lists and the page count are flattened to strings. Missing values
    become ``"null"``; plain text fields are carried as-is, None included.

    Args:
        record: Loaded catalog record
        user_id: Active session user, if any

    Returns:
        SavedBook without an id
    """
    return SavedBook(
        title=record.title,
        authors=_flatten(record.authors),
        description=record.description,
        categories=_flatten(record.categories),
        photo_url=record.thumbnail,
        published_date=record.published_date,
        page_count=_as_string(record.page_count),
        google_book_id=record.id,
        user_id=_as_string(user_id),
        notes="",
        rating=0.0
    )
