"""Data models for catalog records and saved books."""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, List, Dict, Any


@dataclass
class CatalogRecord:
    """Book metadata as returned by the catalog."""
    id: str
    title: Optional[str] = None
    authors: Optional[List[str]] = None
    description: Optional[str] = None
    categories: Optional[List[str]] = None
    thumbnail: Optional[str] = None
    published_date: Optional[str] = None
    page_count: Optional[int] = None

    @property
    def authors_str(self) -> str:
        """Format authors as comma-separated string."""
        return "No Author" if self.authors is None else ", ".join(self.authors)


@dataclass
class SavedBook:
    """Reduced book record persisted for a user."""
    title: Optional[str]
    authors: str
    description: Optional[str]
    categories: str
    photo_url: Optional[str]
    published_date: Optional[str]
    page_count: str
    google_book_id: Optional[str]
    user_id: str
    notes: str = ""
    rating: float = 0.0
    id: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Document body for the store. The id is written after insert."""
        document = asdict(self)
        document.pop("id")
        return document


class Status(Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class Resource:
    """Result of a remote read: loading, success or error."""
    status: Status
    data: Optional[Any] = None
    message: Optional[str] = None

    @classmethod
    def loading(cls, data=None) -> "Resource":
        return cls(Status.LOADING, data)

    @classmethod
    def success(cls, data) -> "Resource":
        return cls(Status.SUCCESS, data)

    @classmethod
    def error(cls, message: str, data=None) -> "Resource":
        return cls(Status.ERROR, data, message)
