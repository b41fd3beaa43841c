import sqlite3
from datetime import datetime
from typing import Any

from src.domain.entities import Port, Terminal, UserInfo
from src.domain.errors import DuplicateRecordError


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def parse_dt(s: str | None) -> datetime | None:
    return datetime.fromisoformat(s) if s else None


def format_dt(dt: datetime | None) -> str | None:
    return dt.isoformat() if dt else None


def _is_unique_violation(exc: sqlite3.IntegrityError) -> bool:
    return "UNIQUE constraint failed" in str(exc)


# SQLite INTEGER is a signed 64-bit value; larger ids can match no row
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


def storable_id(value: int) -> bool:
    return SQLITE_INT_MIN <= value <= SQLITE_INT_MAX


class SQLiteRepo:
    """Shared connection handling. One short-lived connection per call."""

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn


class SQLitePortRepo(SQLiteRepo):
    def _row_to_port(self, row: dict[str, Any]) -> Port:
        return Port(
            id=row["id"],
            code=row["code"],
            name=row["name"],
            added_date=parse_dt(row["added_date"]) or datetime.min,
            last_edited_date=parse_dt(row["last_edited_date"]),
        )

    def list_all(self) -> list[Port]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM ports ORDER BY id ASC").fetchall()
            return [self._row_to_port(row) for row in rows]
        finally:
            conn.close()

    def get_by_id(self, port_id: int) -> Port | None:
        if not storable_id(port_id):
            return None
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM ports WHERE id = ?", (port_id,)).fetchone()
            return self._row_to_port(row) if row else None
        finally:
            conn.close()

    def get_by_code(self, code: str) -> Port | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM ports WHERE code = ?", (code,)).fetchone()
            return self._row_to_port(row) if row else None
        finally:
            conn.close()

    def save(self, port: Port) -> Port:
        conn = self._get_conn()
        try:
            if port.id is None:
                cursor = conn.execute(
                    """
                    INSERT INTO ports (code, name, added_date, last_edited_date)
                    VALUES (?, ?, ?, ?)
                    """,
                    (
                        port.code,
                        port.name,
                        format_dt(port.added_date),
                        format_dt(port.last_edited_date),
                    ),
                )
                saved = port.model_copy(update={"id": cursor.lastrowid})
            else:
                conn.execute(
                    """
                    UPDATE ports SET code = ?, name = ?, added_date = ?, last_edited_date = ?
                    WHERE id = ?
                    """,
                    (
                        port.code,
                        port.name,
                        format_dt(port.added_date),
                        format_dt(port.last_edited_date),
                        port.id,
                    ),
                )
                saved = port
            conn.commit()
            return saved
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if _is_unique_violation(e):
                raise DuplicateRecordError(f"Port code '{port.code}' already stored") from e
            raise
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def delete(self, port_id: int) -> None:
        if not storable_id(port_id):
            return
        conn = self._get_conn()
        try:
            # Terminals are removed by ON DELETE CASCADE
            conn.execute("DELETE FROM ports WHERE id = ?", (port_id,))
            conn.commit()
        finally:
            conn.close()


class SQLiteTerminalRepo(SQLiteRepo):
    def _row_to_terminal(self, row: dict[str, Any]) -> Terminal:
        return Terminal(
            id=row["id"],
            name=row["name"],
            port_id=row["port_id"],
            latitude=row["latitude"],
            longitude=row["longitude"],
            is_active=bool(row["is_active"]),
            added_date=parse_dt(row["added_date"]) or datetime.min,
            last_edited_date=parse_dt(row["last_edited_date"]),
        )

    def list_all(self) -> list[Terminal]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM terminals ORDER BY id ASC").fetchall()
            return [self._row_to_terminal(row) for row in rows]
        finally:
            conn.close()

    def list_by_port(self, port_id: int) -> list[Terminal]:
        if not storable_id(port_id):
            return []
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM terminals WHERE port_id = ? ORDER BY id ASC", (port_id,)
            ).fetchall()
            return [self._row_to_terminal(row) for row in rows]
        finally:
            conn.close()

    def get_by_id(self, terminal_id: int) -> Terminal | None:
        if not storable_id(terminal_id):
            return None
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM terminals WHERE id = ?", (terminal_id,)
            ).fetchone()
            return self._row_to_terminal(row) if row else None
        finally:
            conn.close()

    def get_by_name_and_port(self, name: str, port_id: int) -> Terminal | None:
        if not storable_id(port_id):
            return None
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM terminals WHERE name = ? AND port_id = ?", (name, port_id)
            ).fetchone()
            return self._row_to_terminal(row) if row else None
        finally:
            conn.close()

    def save(self, terminal: Terminal) -> Terminal:
        conn = self._get_conn()
        values = (
            terminal.name,
            terminal.port_id,
            terminal.latitude,
            terminal.longitude,
            1 if terminal.is_active else 0,
            format_dt(terminal.added_date),
            format_dt(terminal.last_edited_date),
        )
        try:
            if terminal.id is None:
                cursor = conn.execute(
                    """
                    INSERT INTO terminals (
                        name, port_id, latitude, longitude, is_active,
                        added_date, last_edited_date
                    ) VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    values,
                )
                saved = terminal.model_copy(update={"id": cursor.lastrowid})
            else:
                conn.execute(
                    """
                    UPDATE terminals SET
                        name = ?, port_id = ?, latitude = ?, longitude = ?, is_active = ?,
                        added_date = ?, last_edited_date = ?
                    WHERE id = ?
                    """,
                    (*values, terminal.id),
                )
                saved = terminal
            conn.commit()
            return saved
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if _is_unique_violation(e):
                raise DuplicateRecordError(
                    f"Terminal '{terminal.name}' already stored for port {terminal.port_id}"
                ) from e
            raise
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def delete(self, terminal_id: int) -> None:
        if not storable_id(terminal_id):
            return
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM terminals WHERE id = ?", (terminal_id,))
            conn.commit()
        finally:
            conn.close()


class SQLiteUserRepo(SQLiteRepo):
    def _row_to_user(self, row: dict[str, Any]) -> UserInfo:
        return UserInfo(
            id=row["id"],
            username=row["username"],
            email=row["email"],
            password_hash=row["password_hash"],
        )

    def get_by_username(self, username: str) -> UserInfo | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM user_info WHERE username = ?", (username,)
            ).fetchone()
            return self._row_to_user(row) if row else None
        finally:
            conn.close()

    def find_by_username_or_email(self, username: str, email: str) -> UserInfo | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM user_info WHERE username = ? OR email = ? LIMIT 1",
                (username, email),
            ).fetchone()
            return self._row_to_user(row) if row else None
        finally:
            conn.close()

    def save(self, user: UserInfo) -> UserInfo:
        conn = self._get_conn()
        try:
            cursor = conn.execute(
                "INSERT INTO user_info (username, email, password_hash) VALUES (?, ?, ?)",
                (user.username, user.email, user.password_hash),
            )
            conn.commit()
            return user.model_copy(update={"id": cursor.lastrowid})
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if _is_unique_violation(e):
                raise DuplicateRecordError("Username or email already stored") from e
            raise
        finally:
            conn.close()
