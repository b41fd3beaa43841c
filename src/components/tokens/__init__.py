"""
Tokens component - JWT issue and validation.
"""

from .component import EMAIL_CLAIM, USERNAME_CLAIM, TokenClaims, TokenService

__all__ = [
    "TokenService",
    "TokenClaims",
    "USERNAME_CLAIM",
    "EMAIL_CLAIM",
]
