from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import jwt
from passlib.context import CryptContext

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    result: bool = pwd_context.verify(plain_password, hashed_password)
    return result


def get_password_hash(password: str) -> str:
    result: str = pwd_context.hash(password)
    return result


def create_access_token(
    data: dict[str, Any],
    *,
    secret_key: str,
    issuer: str,
    audience: str,
    expires_delta: timedelta,
    now_utc: datetime | None = None,
) -> str:
    """
    Create a signed JWT access token.

    Args:
        data: Claims to encode in the token
        secret_key: Symmetric HS256 signing key
        issuer: Value of the `iss` claim
        audience: Value of the `aud` claim
        expires_delta: Lifetime added to the issue time for `exp`
        now_utc: Issue time (for testing/determinism). Defaults to datetime.now(UTC).
    """
    to_encode = data.copy()
    current_time = now_utc if now_utc is not None else datetime.now(UTC)

    to_encode.update(
        {
            "iss": issuer,
            "aud": audience,
            "iat": current_time,
            "nbf": current_time,
            "exp": current_time + expires_delta,
        }
    )
    encoded_jwt: str = jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)
    return encoded_jwt


def decode_access_token(
    token: str, *, secret_key: str, issuer: str, audience: str
) -> dict[str, Any] | None:
    """Return the claims when signature, issuer, audience and lifetime all check out."""
    try:
        payload = jwt.decode(
            token,
            secret_key,
            algorithms=[ALGORITHM],
            audience=audience,
            issuer=issuer,
            # jose skips exp/aud/iss checks for absent claims unless required
            options={"require_exp": True, "require_aud": True, "require_iss": True},
        )
        return cast(dict[str, Any], payload)
    except jwt.JWTError:
        return None
