"""
SQLite repositories against a migrated database.
"""

import sqlite3

import pytest

from src.adapters.sqlite.repos import SQLitePortRepo, SQLiteTerminalRepo, SQLiteUserRepo
from src.domain.entities import Port, Terminal, UserInfo
from src.domain.errors import DuplicateRecordError


@pytest.fixture
def port_repo(db_path):
    return SQLitePortRepo(db_path)


@pytest.fixture
def terminal_repo(db_path):
    return SQLiteTerminalRepo(db_path)


@pytest.fixture
def user_repo(db_path):
    return SQLiteUserRepo(db_path)


@pytest.fixture
def port(port_repo, fixed_now):
    return port_repo.save(Port(code="AAAAA", name="Port A", added_date=fixed_now))


def _terminal(port_id: int, name: str = "T1", **overrides) -> Terminal:
    values = {"name": name, "port_id": port_id, "latitude": 40.7128, "longitude": -74.006}
    values.update(overrides)
    return Terminal(**values)


# --- Ports ---


def test_port_roundtrip(port_repo, port, fixed_now):
    assert port.id == 1

    loaded = port_repo.get_by_id(port.id)

    assert loaded == port
    assert loaded.added_date == fixed_now
    assert port_repo.get_by_code("AAAAA").id == port.id
    assert port_repo.get_by_code("ZZZZZ") is None


def test_port_update(port_repo, port, fixed_now):
    port_repo.save(port.model_copy(update={"name": "Port A2", "last_edited_date": fixed_now}))

    loaded = port_repo.get_by_id(port.id)
    assert loaded.name == "Port A2"
    assert loaded.last_edited_date == fixed_now


def test_port_code_unique_index(port_repo, port):
    with pytest.raises(DuplicateRecordError):
        port_repo.save(Port(code="AAAAA", name="Duplicate"))

    assert len(port_repo.list_all()) == 1


def test_port_list_ordered_by_id(port_repo, port):
    port_repo.save(Port(code="BBBBB", name="Port B"))

    assert [p.code for p in port_repo.list_all()] == ["AAAAA", "BBBBB"]


def test_port_ids_not_reused(port_repo, port):
    port_repo.delete(port.id)

    again = port_repo.save(Port(code="AAAAA", name="Port A"))

    assert again.id == 2


# --- Terminals ---


def test_terminal_roundtrip(terminal_repo, port):
    saved = terminal_repo.save(_terminal(port.id, is_active=False))

    loaded = terminal_repo.get_by_id(saved.id)

    assert loaded.name == "T1"
    assert loaded.port_id == port.id
    assert loaded.latitude == 40.7128
    assert loaded.longitude == -74.006
    assert loaded.is_active is False
    assert terminal_repo.get_by_name_and_port("T1", port.id).id == saved.id
    assert terminal_repo.list_by_port(port.id) == [loaded]


def test_terminal_name_unique_per_port(terminal_repo, port_repo, port):
    other = port_repo.save(Port(code="BBBBB", name="Port B"))
    terminal_repo.save(_terminal(port.id))
    terminal_repo.save(_terminal(other.id))

    with pytest.raises(DuplicateRecordError):
        terminal_repo.save(_terminal(port.id))

    assert len(terminal_repo.list_all()) == 2


def test_terminal_requires_existing_port(terminal_repo):
    with pytest.raises(sqlite3.IntegrityError):
        terminal_repo.save(_terminal(99))


def test_port_delete_cascades_to_terminals(port_repo, terminal_repo, port):
    saved = terminal_repo.save(_terminal(port.id))

    port_repo.delete(port.id)

    assert port_repo.get_by_id(port.id) is None
    assert terminal_repo.get_by_id(saved.id) is None


def test_terminal_delete(terminal_repo, port):
    saved = terminal_repo.save(_terminal(port.id))

    terminal_repo.delete(saved.id)

    assert terminal_repo.list_all() == []


# --- Users ---


def test_user_save_and_lookup(user_repo):
    saved = user_repo.save(UserInfo(username="alice", email="alice@example.com", password_hash="h"))

    assert saved.id == 1
    assert user_repo.get_by_username("alice") == saved
    assert user_repo.find_by_username_or_email("x", "alice@example.com") == saved
    assert user_repo.find_by_username_or_email("x", "y@example.com") is None


@pytest.mark.parametrize(
    "username,email",
    [("alice", "other@example.com"), ("other", "alice@example.com")],
)
def test_user_unique_indexes(user_repo, username, email):
    user_repo.save(UserInfo(username="alice", email="alice@example.com", password_hash="h"))

    with pytest.raises(DuplicateRecordError):
        user_repo.save(UserInfo(username=username, email=email, password_hash="h"))


# --- Id range ---

HUGE_ID = 99999999999999999999


def test_ids_beyond_sqlite_integer_match_nothing(port_repo, terminal_repo, port):
    """Ids outside the signed 64-bit range behave as absent rows."""
    assert port_repo.get_by_id(HUGE_ID) is None
    assert terminal_repo.get_by_id(HUGE_ID) is None
    assert terminal_repo.get_by_name_and_port("T1", HUGE_ID) is None
    assert terminal_repo.list_by_port(-HUGE_ID) == []

    port_repo.delete(HUGE_ID)
    terminal_repo.delete(HUGE_ID)

    assert port_repo.get_by_id(port.id) == port
