"""
Accounts component - User registration and credential verification.
"""

from .component import DUPLICATE_ACCOUNT_MESSAGE, AccountService
from .models import AccountCandidate

__all__ = [
    "AccountService",
    "AccountCandidate",
    "DUPLICATE_ACCOUNT_MESSAGE",
]
