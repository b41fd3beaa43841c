import os
import sqlite3

from src.adapters.sqlite.migrator import SQLiteMigrator


def test_migrations_apply_once(tmp_path, migrations_dir):
    db_path = os.path.join(str(tmp_path), "nested", "maritime.db")
    migrator = SQLiteMigrator(db_path, migrations_dir)

    first = migrator.run_migrations()
    second = migrator.run_migrations()

    assert first == ["001_maritime.sql"]
    assert second == []

    conn = sqlite3.connect(db_path)
    try:
        recorded = [row[0] for row in conn.execute("SELECT filename FROM _migrations")]
        tables = {
            row[0]
            for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        }
        indexes = {
            row[0]
            for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'index'")
        }
    finally:
        conn.close()

    assert recorded == ["001_maritime.sql"]
    assert {"ports", "terminals", "user_info"} <= tables
    assert {
        "ux_ports_code",
        "ux_terminals_name_port",
        "ux_user_info_username",
        "ux_user_info_email",
    } <= indexes


def test_down_section_not_applied(db_path):
    """The rollback half of a migration file is never run on upgrade."""
    conn = sqlite3.connect(db_path)
    try:
        count = conn.execute(
            "SELECT COUNT(*) FROM sqlite_master WHERE type = 'table' AND name = 'ports'"
        ).fetchone()[0]
    finally:
        conn.close()

    assert count == 1
