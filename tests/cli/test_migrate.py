import sqlite3

import pytest

from cli.migrate import apply_pending_migrations, get_applied_migrations
from config import get_migrations_dir


def test_apply_creates_categories_table(test_db):
    applied = apply_pending_migrations(test_db, get_migrations_dir())

    assert "001_create_categories.sql" in applied
    columns = [row[1] for row in test_db.execute("PRAGMA table_info(categories)")]
    assert columns == ["id", "uuid", "name", "description"]


def test_apply_twice_is_a_no_op(test_db):
    apply_pending_migrations(test_db, get_migrations_dir())

    assert apply_pending_migrations(test_db, get_migrations_dir()) == []
    assert "001_create_categories.sql" in get_applied_migrations(test_db)


def test_failing_migration_is_not_recorded(tmp_path):
    (tmp_path / "001_ok.sql").write_text("CREATE TABLE ok (id INTEGER);")
    (tmp_path / "002_broken.sql").write_text("CREATE TABLE broken (;")
    conn = sqlite3.connect(":memory:")

    with pytest.raises(sqlite3.Error):
        apply_pending_migrations(conn, tmp_path)

    assert get_applied_migrations(conn) == {"001_ok.sql"}
    conn.close()
