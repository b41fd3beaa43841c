from datetime import UTC, datetime

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(UTC)


# --- Ports & Terminals ---

class Port(BaseModel):
    id: int | None = None
    code: str
    name: str
    added_date: datetime = Field(default_factory=_utcnow)
    last_edited_date: datetime | None = None


class Terminal(BaseModel):
    id: int | None = None
    name: str
    port_id: int
    latitude: float
    longitude: float
    is_active: bool = True
    added_date: datetime = Field(default_factory=_utcnow)
    last_edited_date: datetime | None = None


# --- Accounts ---

class UserInfo(BaseModel):
    id: int | None = None
    username: str
    email: str
    password_hash: str
