"""
AccountService - Registration and credential checks.

Input shape (required fields, lengths, email format) is checked by the API
layer before these methods run.
"""

from __future__ import annotations

import logging

from src.domain.entities import UserInfo
from src.domain.errors import Conflict, DuplicateRecordError
from src.ports.auth import PasswordHasherPort
from src.ports.repo import UserRepoPort

from .models import AccountCandidate

logger = logging.getLogger(__name__)

DUPLICATE_ACCOUNT_MESSAGE = "Username or email already exists"


class AccountService:
    def __init__(self, user_repo: UserRepoPort, hasher: PasswordHasherPort) -> None:
        self._users = user_repo
        self._hasher = hasher

    def user_exists(self, candidate: AccountCandidate) -> bool:
        """True when either the username or the email is already taken."""
        match = self._users.find_by_username_or_email(candidate.username, candidate.email)
        return match is not None

    def register_user(self, candidate: AccountCandidate) -> UserInfo:
        """
        Store a new account with a salted hash of the password.

        The unique indexes on username and email are the final word: a
        registration that loses a race to a concurrent one surfaces as Conflict.
        """
        user = UserInfo(
            username=candidate.username,
            email=candidate.email,
            password_hash=self._hasher.hash_password(candidate.password),
        )
        try:
            saved = self._users.save(user)
        except DuplicateRecordError as e:
            logger.warning("Registration lost a uniqueness race for %s", candidate.username)
            raise Conflict(DUPLICATE_ACCOUNT_MESSAGE) from e

        logger.info("Registered user %s", saved.username)
        return saved

    def authenticate(self, candidate: AccountCandidate) -> UserInfo | None:
        """Return the stored account when the username exists and the password matches."""
        user = self._users.get_by_username(candidate.username)
        if user is None:
            return None
        if not self._hasher.verify_password(candidate.password, user.password_hash):
            return None
        return user

    def verify_credentials(self, candidate: AccountCandidate) -> bool:
        return self.authenticate(candidate) is not None
