"""
Accounts component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

USERNAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 100
PASSWORD_MIN_LENGTH = 4
PASSWORD_MAX_LENGTH = 100


@dataclass(frozen=True)
class AccountCandidate:
    """Credentials submitted for registration or login."""

    username: str
    email: str
    password: str

    def __repr__(self) -> str:
        return f"AccountCandidate(username={self.username!r}, email={self.email!r})"
