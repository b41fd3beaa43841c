import os
from datetime import UTC, datetime
from pathlib import Path

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator

MIGRATIONS_DIR = str(Path(__file__).resolve().parent.parent / "migrations")

TEST_SIGNING_KEY = "test-signing-key-with-at-least-32-bytes!!"


class FixedClock:
    """Clock pinned to a given instant."""

    def __init__(self, instant: datetime) -> None:
        self.instant = instant

    def now_utc(self) -> datetime:
        return self.instant


@pytest.fixture
def migrations_dir() -> str:
    return MIGRATIONS_DIR


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 8, 29, 17, 0, 0, tzinfo=UTC)


@pytest.fixture
def clock(fixed_now):
    return FixedClock(fixed_now)


@pytest.fixture
def db_path(tmp_path, migrations_dir):
    """A migrated SQLite database in a temp directory."""
    path = os.path.join(str(tmp_path), "maritime.db")
    SQLiteMigrator(path, migrations_dir).run_migrations()
    return path
