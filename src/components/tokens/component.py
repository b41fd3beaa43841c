"""
TokenService - Signed bearer tokens for registered accounts.

Tokens are HS256 JWTs carrying the username and email. Validation checks
signature, issuer, audience and lifetime.
"""

from dataclasses import dataclass
from datetime import timedelta

from src.api.auth_utils import create_access_token, decode_access_token
from src.app_shell.config import JwtSettings
from src.domain.entities import UserInfo
from src.ports.clock import ClockPort

USERNAME_CLAIM = "unique_name"
EMAIL_CLAIM = "email"


@dataclass(frozen=True)
class TokenClaims:
    username: str
    email: str


class TokenService:
    """Issues and validates HS256 bearer tokens for registered accounts."""

    def __init__(self, settings: JwtSettings, clock: ClockPort):
        self.settings = settings
        self.clock = clock

    def issue_token(self, account: UserInfo) -> str:
        return create_access_token(
            {USERNAME_CLAIM: account.username, EMAIL_CLAIM: account.email},
            secret_key=self.settings.key,
            issuer=self.settings.issuer,
            audience=self.settings.audience,
            expires_delta=timedelta(minutes=self.settings.expires_in_minutes),
            now_utc=self.clock.now_utc(),
        )

    def validate_token(self, token: str) -> TokenClaims | None:
        payload = decode_access_token(
            token,
            secret_key=self.settings.key,
            issuer=self.settings.issuer,
            audience=self.settings.audience,
        )
        if not payload:
            return None

        username = payload.get(USERNAME_CLAIM)
        email = payload.get(EMAIL_CLAIM)
        if not isinstance(username, str) or not isinstance(email, str):
            return None
        return TokenClaims(username=username, email=email)
