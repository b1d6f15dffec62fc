"""Tests for the document store with a mocked connection pool."""
import pytest
from unittest.mock import MagicMock, patch
from bookdetails.database import DocumentStore, generate_document_id


@pytest.fixture
def store():
    with patch("bookdetails.database.psycopg2.pool.SimpleConnectionPool") as pool_cls:
        conn = MagicMock()
        cursor = conn.cursor.return_value.__enter__.return_value
        pool_cls.return_value.getconn.return_value = conn
        db = DocumentStore("postgresql://test")
        yield db, conn, cursor


def test_generate_document_id():
    """Test ids are 20 alphanumeric characters and distinct."""
    first, second = generate_document_id(), generate_document_id()

    assert len(first) == 20
    assert first.isalnum()
    assert first != second


def test_add_returns_generated_id(store):
    """Test insert commits and hands back the new id."""
    db, conn, cursor = store

    doc_id = db.collection("books").add({"title": "Dune"})

    assert len(doc_id) == 20
    params = cursor.execute.call_args[0][1]
    assert params[0] == "books"
    assert params[1] == doc_id
    assert params[2].adapted == {"title": "Dune"}
    conn.commit.assert_called_once()
    db.connection_pool.putconn.assert_called_once_with(conn)


def test_add_failure_raises(store):
    """Test insert errors roll back and propagate."""
    db, conn, cursor = store
    cursor.execute.side_effect = RuntimeError("db down")

    with pytest.raises(RuntimeError):
        db.collection("books").add({"title": "Dune"})

    conn.rollback.assert_called_once()
    db.connection_pool.putconn.assert_called_once_with(conn)


def test_update_existing(store):
    """Test update reports success when a row matched."""
    db, conn, cursor = store
    cursor.rowcount = 1

    assert db.collection("books").update("abc", {"id": "abc"}) is True
    params = cursor.execute.call_args[0][1]
    assert params[1:] == ("books", "abc")


def test_update_missing_document(store):
    """Test update reports failure when nothing matched."""
    db, conn, cursor = store
    cursor.rowcount = 0

    assert db.collection("books").update("nope", {"id": "nope"}) is False


def test_update_error_is_logged(store):
    """Test update errors are rolled back and reported as False."""
    db, conn, cursor = store
    cursor.execute.side_effect = RuntimeError("db down")

    assert db.collection("books").update("abc", {"id": "abc"}) is False
    conn.rollback.assert_called_once()


def test_get_and_find_by_user(store):
    """Test reads return the stored JSON documents."""
    db, conn, cursor = store
    cursor.fetchone.return_value = ({"id": "abc", "title": "Dune"},)
    cursor.fetchall.return_value = [({"id": "abc"},), ({"id": "def"},)]
    books = db.collection("books")

    assert books.get("abc") == {"id": "abc", "title": "Dune"}
    assert books.find_by_user("alice") == [{"id": "abc"}, {"id": "def"}]

    cursor.fetchone.return_value = None
    assert books.get("missing") is None
