from typing import Protocol

from src.domain.entities import Port, Terminal, UserInfo


class PortRepoPort(Protocol):
    def list_all(self) -> list[Port]:
        ...

    def get_by_id(self, port_id: int) -> Port | None:
        ...

    def get_by_code(self, code: str) -> Port | None:
        ...

    def save(self, port: Port) -> Port:
        """Insert when `port.id` is None, otherwise update. Returns the stored record."""
        ...

    def delete(self, port_id: int) -> None:
        """Delete the port. Its terminals go with it."""
        ...


class TerminalRepoPort(Protocol):
    def list_all(self) -> list[Terminal]:
        ...

    def list_by_port(self, port_id: int) -> list[Terminal]:
        ...

    def get_by_id(self, terminal_id: int) -> Terminal | None:
        ...

    def get_by_name_and_port(self, name: str, port_id: int) -> Terminal | None:
        ...

    def save(self, terminal: Terminal) -> Terminal:
        ...

    def delete(self, terminal_id: int) -> None:
        ...


class UserRepoPort(Protocol):
    def get_by_username(self, username: str) -> UserInfo | None:
        ...

    def find_by_username_or_email(self, username: str, email: str) -> UserInfo | None:
        ...

    def save(self, user: UserInfo) -> UserInfo:
        """Insert a new account. Raises DuplicateRecordError on a unique clash."""
        ...
