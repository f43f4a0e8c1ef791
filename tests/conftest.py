"""Shared pytest fixtures for all tests."""

import sqlite3
import pytest
from pathlib import Path
from uuid import UUID

from cli.migrate import apply_pending_migrations
from config import Config, get_migrations_dir
from models.category import Category
from services.base import Services


@pytest.fixture
def test_db():
    """Create an in-memory SQLite database for testing.

    Yields:
        sqlite3.Connection: Connection to in-memory database.
    """
    conn = sqlite3.connect(":memory:")
    yield conn
    conn.close()


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "booklib",
        db_data_dir=tmp_path / "booklib" / "db",
        db_filename="test.db",
        log_level="DEBUG",
        log_dir=tmp_path / "booklib" / "logs",
        enable_reset=False,
        default_page_size=5,
    )


class _TestConnectionContext:
    """Context manager handing out the shared test connection."""

    def __init__(self, conn):
        self.conn = conn

    def __enter__(self):
        return self.conn

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Don't close the connection - the test_db fixture owns it
        pass


class TestDatabaseManager:
    """Database manager backed by a single in-memory connection."""

    __test__ = False

    def __init__(self, conn):
        self.conn = conn

    def connect(self):
        return _TestConnectionContext(self.conn)

    def get_db_path(self):
        return Path(":memory:")

    def get_migrations_dir(self):
        return get_migrations_dir()


@pytest.fixture
def db_manager_with_schema(test_db):
    """Create a database manager whose in-memory database has all migrations applied.

    Args:
        test_db: In-memory database connection fixture.

    Returns:
        TestDatabaseManager: Database manager with schema ready.
    """
    apply_pending_migrations(test_db, get_migrations_dir())
    return TestDatabaseManager(test_db)


@pytest.fixture
def services(test_config, db_manager_with_schema):
    """Create a Services container with test database.

    Args:
        test_config: Test configuration fixture.
        db_manager_with_schema: Database manager with schema set up.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, db_manager=db_manager_with_schema)


@pytest.fixture
def category_uuid():
    return UUID("3f1c2a9e-8d4b-4c6a-9e1f-2b7d5a0c4e81")


@pytest.fixture
def prepared_category(category_uuid):
    """A persisted-looking category as the repository would return it."""
    return Category(
        id=1,
        uuid=category_uuid,
        name="Test Category",
        description="Test Description",
    )
