"""
In-memory stand-ins for the repositories.

The port and terminal repos share one store so deleting a port drops its
terminals, like the ON DELETE CASCADE in the real schema.
"""

import pytest

from src.domain.entities import Port, Terminal, UserInfo
from src.domain.errors import DuplicateRecordError


class MemoryStore:
    def __init__(self):
        self.ports: dict[int, Port] = {}
        self.terminals: dict[int, Terminal] = {}
        self.users: dict[int, UserInfo] = {}
        self._next_id = {"ports": 1, "terminals": 1, "users": 1}

    def next_id(self, table: str) -> int:
        value = self._next_id[table]
        self._next_id[table] += 1
        return value


class MockPortRepo:
    def __init__(self, store: MemoryStore):
        self.store = store

    def list_all(self) -> list[Port]:
        return list(self.store.ports.values())

    def get_by_id(self, port_id: int) -> Port | None:
        return self.store.ports.get(port_id)

    def get_by_code(self, code: str) -> Port | None:
        return next((p for p in self.store.ports.values() if p.code == code), None)

    def save(self, port: Port) -> Port:
        if port.id is None:
            port = port.model_copy(update={"id": self.store.next_id("ports")})
        self.store.ports[port.id] = port
        return port

    def delete(self, port_id: int) -> None:
        self.store.ports.pop(port_id, None)
        for tid in [t.id for t in self.store.terminals.values() if t.port_id == port_id]:
            del self.store.terminals[tid]


class MockTerminalRepo:
    def __init__(self, store: MemoryStore):
        self.store = store

    def list_all(self) -> list[Terminal]:
        return list(self.store.terminals.values())

    def list_by_port(self, port_id: int) -> list[Terminal]:
        return [t for t in self.store.terminals.values() if t.port_id == port_id]

    def get_by_id(self, terminal_id: int) -> Terminal | None:
        return self.store.terminals.get(terminal_id)

    def get_by_name_and_port(self, name: str, port_id: int) -> Terminal | None:
        return next(
            (t for t in self.store.terminals.values() if t.name == name and t.port_id == port_id),
            None,
        )

    def save(self, terminal: Terminal) -> Terminal:
        if terminal.id is None:
            terminal = terminal.model_copy(update={"id": self.store.next_id("terminals")})
        self.store.terminals[terminal.id] = terminal
        return terminal

    def delete(self, terminal_id: int) -> None:
        self.store.terminals.pop(terminal_id, None)


class MockUserRepo:
    def __init__(self, store: MemoryStore):
        self.store = store

    def get_by_username(self, username: str) -> UserInfo | None:
        return next((u for u in self.store.users.values() if u.username == username), None)

    def find_by_username_or_email(self, username: str, email: str) -> UserInfo | None:
        return next(
            (u for u in self.store.users.values() if u.username == username or u.email == email),
            None,
        )

    def save(self, user: UserInfo) -> UserInfo:
        if self.find_by_username_or_email(user.username, user.email):
            raise DuplicateRecordError("Username or email already stored")
        user = user.model_copy(update={"id": self.store.next_id("users")})
        self.store.users[user.id] = user
        return user


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def port_repo(store):
    return MockPortRepo(store)


@pytest.fixture
def terminal_repo(store):
    return MockTerminalRepo(store)


@pytest.fixture
def user_repo(store):
    return MockUserRepo(store)
