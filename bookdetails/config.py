"""Configuration management."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _optional_float(name: str):
    value = os.getenv(name)
    return float(value) if value else None


class Config:
    """Application configuration."""

    # Database
    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_PORT = os.getenv("DB_PORT", "5432")
    DB_NAME = os.getenv("DB_NAME", "booksdb")
    DB_USER = os.getenv("DB_USER", "postgres")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "")

    @property
    def DATABASE_URL(self):
        """Build PostgreSQL connection string."""
        return f"postgresql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # Collection that saved books are written to
    BOOKS_COLLECTION = os.getenv("BOOKS_COLLECTION", "books")

    # API
    GOOGLE_BOOKS_API_KEY = os.getenv("GOOGLE_BOOKS_API_KEY")

    # Session
    READER_USER_ID = os.getenv("READER_USER_ID")

    # Defaults
    DEFAULT_TIMEOUT = int(os.getenv("DEFAULT_TIMEOUT", "10"))
    # Unset means the details request waits as long as the server does
    DETAILS_TIMEOUT = _optional_float("DETAILS_TIMEOUT")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
