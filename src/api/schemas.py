import re

from pydantic import BaseModel, Field, field_validator

from src.components.accounts.models import (
    EMAIL_MAX_LENGTH,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    USERNAME_MAX_LENGTH,
)
from src.domain.views import CamelModel

# One "@" with something on each side
EMAIL_REGEX = re.compile(r"^[^@]+@[^@]+$")


# --- Ports ---
class PortCreateRequest(CamelModel):
    code: str
    name: str


class PortUpdateRequest(PortCreateRequest):
    id: int


# --- Terminals ---
class TerminalCreateRequest(CamelModel):
    name: str
    port_id: int
    latitude: float
    longitude: float
    is_active: bool = True


class TerminalUpdateRequest(TerminalCreateRequest):
    id: int
    is_active: bool


# --- Accounts ---
class UserAccountRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=USERNAME_MAX_LENGTH)
    email: str = Field(..., max_length=EMAIL_MAX_LENGTH)
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH)

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Username is required.")
        return v

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        if not EMAIL_REGEX.match(v):
            raise ValueError("Invalid email address.")
        return v


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str


# --- Errors ---
class ErrorResponse(CamelModel):
    status_code: int
    message: str
