"""Document store backed by PostgreSQL JSONB."""
import secrets
import string
import psycopg2
from psycopg2 import pool
from psycopg2.extras import Json
from typing import Optional, List, Dict, Any
import logging

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_letters + string.digits
_ID_LENGTH = 20


def generate_document_id() -> str:
    """Random 20-character alphanumeric document id."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


class DocumentStore:
    """Collections of JSON documents in PostgreSQL, with connection pooling."""

    def __init__(self, connection_string: str, min_conn: int = 1, max_conn: int = 10):
        """
        Initialize database connection pool.

        Args:
            connection_string: PostgreSQL connection string
            min_conn: Minimum connections in pool
            max_conn: Maximum connections in pool
        """
        self.connection_pool = psycopg2.pool.SimpleConnectionPool(
            min_conn,
            max_conn,
            connection_string
        )
        logger.info("Database connection pool created successfully")

    def init_schema(self):
        """Create the documents table if it doesn't exist."""
        conn = self.connection_pool.getconn()
        try:
            with conn.cursor() as cur:
                cur.execute("""
                    CREATE TABLE IF NOT EXISTS documents (
                        collection VARCHAR(255) NOT NULL,
                        id VARCHAR(64) NOT NULL,
                        data JSONB NOT NULL,
                        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                        PRIMARY KEY (collection, id)
                    )
                """)

                cur.execute("""
                    CREATE INDEX IF NOT EXISTS idx_documents_user
                    ON documents (collection, (data->>'user_id'))
                """)

                conn.commit()
                logger.info("Database schema initialized successfully")

        finally:
            self.connection_pool.putconn(conn)

    def collection(self, name: str) -> "Collection":
        """Handle on a named collection."""
        return Collection(self, name)

    def close(self):
        """Close all connections in the pool."""
        if self.connection_pool:
            self.connection_pool.closeall()
            logger.info("Database connection pool closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()


class Collection:
    """A named set of documents inside a DocumentStore."""

    def __init__(self, store: DocumentStore, name: str):
        self.store = store
        self.name = name

    def add(self, document: Dict[str, Any]) -> str:
        """
        Insert a new document under a generated id.

        Args:
            document: JSON-serializable document body

        Returns:
            The generated document id

        Raises:
            psycopg2.Error: if the insert fails
        """
        doc_id = generate_document_id()
        conn = self.store.connection_pool.getconn()
        try:
            with conn.cursor() as cur:
                cur.execute("""
                    INSERT INTO documents (collection, id, data)
                    VALUES (%s, %s, %s)
                """, (self.name, doc_id, Json(document)))
                conn.commit()
                logger.info(f"Added document {self.name}/{doc_id}")
                return doc_id
        except Exception:
            conn.rollback()
            raise
        finally:
            self.store.connection_pool.putconn(conn)

    def update(self, doc_id: str, fields: Dict[str, Any]) -> bool:
        """
        Merge fields into an existing document.

        Args:
            doc_id: Document id
            fields: Fields to set

        Returns:
            True if the document existed and was updated, False otherwise
        """
        conn = self.store.connection_pool.getconn()
        try:
            with conn.cursor() as cur:
                cur.execute("""
                    UPDATE documents
                    SET data = data || %s, updated_at = CURRENT_TIMESTAMP
                    WHERE collection = %s AND id = %s
                """, (Json(fields), self.name, doc_id))
                updated = cur.rowcount
                conn.commit()
                if not updated:
                    logger.error(f"No document to update: {self.name}/{doc_id}")
                    return False
                return True
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update document: {e}")
            return False
        finally:
            self.store.connection_pool.putconn(conn)

    def get(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """Get a document by id."""
        conn = self.store.connection_pool.getconn()
        try:
            with conn.cursor() as cur:
                cur.execute("""
                    SELECT data FROM documents
                    WHERE collection = %s AND id = %s
                """, (self.name, doc_id))

                row = cur.fetchone()
                return row[0] if row else None  # JSONB is automatically deserialized
        finally:
            self.store.connection_pool.putconn(conn)

    def find_by_user(self, user_id: str, limit: int = 100) -> List[Dict[str, Any]]:
        """Documents owned by a user, newest first."""
        conn = self.store.connection_pool.getconn()
        try:
            with conn.cursor() as cur:
                cur.execute("""
                    SELECT data FROM documents
                    WHERE collection = %s AND data->>'user_id' = %s
                    ORDER BY created_at DESC
                    LIMIT %s
                """, (self.name, user_id, limit))
                return [row[0] for row in cur.fetchall()]
        finally:
            self.store.connection_pool.putconn(conn)
