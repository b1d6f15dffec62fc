"""Tests for the save flow."""
import pytest
from unittest.mock import MagicMock
from bookdetails.auth import Session
from bookdetails.models import CatalogRecord
from bookdetails.navigation import Navigator
from bookdetails.save import build_saved_book, save_to_collection


class FakeCollection:
    """In-memory collection that can be told to fail either write."""

    def __init__(self, fail_add=False, fail_update=False):
        self.docs = {}
        self.fail_add = fail_add
        self.fail_update = fail_update

    def add(self, document):
        if self.fail_add:
            raise RuntimeError("insert rejected")
        doc_id = f"doc{len(self.docs) + 1}"
        self.docs[doc_id] = dict(document)
        return doc_id

    def update(self, doc_id, fields):
        if self.fail_update or doc_id not in self.docs:
            return False
        self.docs[doc_id].update(fields)
        return True


def make_record():
    return CatalogRecord(
        id="vol-1",
        title="Dune",
        authors=["Frank Herbert"],
        categories=["Fiction"],
        page_count=412
    )


def test_build_saved_book_uses_session_user():
    """Test the active session user is stamped on the book."""
    book = build_saved_book(make_record(), Session("alice"))
    assert book.user_id == "alice"


def test_build_saved_book_without_user():
    """Test saving while signed out does not raise."""
    book = build_saved_book(make_record(), Session())
    assert book.user_id == "null"


def test_save_success_navigates_back_once():
    """Test insert then update stores the id and goes back exactly once."""
    collection = FakeCollection()
    navigator = MagicMock()
    book = build_saved_book(make_record(), Session("alice"))

    assert save_to_collection(book, collection, navigator) is True

    assert navigator.pop_back_stack.call_count == 1
    assert book.id == "doc1"
    stored = collection.docs["doc1"]
    assert stored["id"] == "doc1"
    assert stored["title"] == "Dune"
    assert stored["authors"] == "[Frank Herbert]"
    assert stored["page_count"] == "412"
    assert stored["user_id"] == "alice"


def test_save_update_failure_does_not_navigate(caplog):
    """Test a failed update is logged and leaves the screen in place."""
    collection = FakeCollection(fail_update=True)
    navigator = MagicMock()
    book = build_saved_book(make_record(), Session("alice"))

    with caplog.at_level("WARNING"):
        assert save_to_collection(book, collection, navigator) is False

    navigator.pop_back_stack.assert_not_called()
    assert "doc1" in collection.docs
    assert "id" not in collection.docs["doc1"]
    assert any(r.levelname == "WARNING" for r in caplog.records)


def test_save_insert_failure_propagates():
    """Test an insert failure is not handled by the save flow."""
    navigator = MagicMock()
    book = build_saved_book(make_record(), Session("alice"))

    with pytest.raises(RuntimeError):
        save_to_collection(book, FakeCollection(fail_add=True), navigator)

    navigator.pop_back_stack.assert_not_called()


def test_save_pops_real_navigator():
    """Test the details route is left after saving."""
    navigator = Navigator("SearchScreen")
    navigator.navigate("DetailScreen")

    save_to_collection(build_saved_book(make_record(), Session("bob")), FakeCollection(), navigator)

    assert navigator.current == "SearchScreen"
    assert navigator.back_stack == ["SearchScreen"]
