"""Open account endpoints: registration and token issue."""

import logging

from fastapi import APIRouter, Depends

from src.api.deps import get_account_service, get_token_service
from src.api.schemas import MessageResponse, TokenResponse, UserAccountRequest
from src.components.accounts import DUPLICATE_ACCOUNT_MESSAGE, AccountCandidate, AccountService
from src.components.tokens import TokenService
from src.domain.errors import Conflict, Unauthorized

logger = logging.getLogger(__name__)

router = APIRouter()


def _candidate(req: UserAccountRequest) -> AccountCandidate:
    return AccountCandidate(username=req.username, email=req.email, password=req.password)


@router.post("/registeruser", response_model=MessageResponse)
def register_user(
    req: UserAccountRequest,
    service: AccountService = Depends(get_account_service),
) -> MessageResponse:
    """Register a new user. Username and email must both be unused."""
    candidate = _candidate(req)
    if service.user_exists(candidate):
        logger.warning("Registration failed: username or email already exists")
        raise Conflict(DUPLICATE_ACCOUNT_MESSAGE)

    service.register_user(candidate)
    return MessageResponse(message="User registered successfully")


@router.post("/gettoken", response_model=TokenResponse)
def get_token(
    req: UserAccountRequest,
    service: AccountService = Depends(get_account_service),
    token_service: TokenService = Depends(get_token_service),
) -> TokenResponse:
    """Exchange valid credentials for a bearer token."""
    account = service.authenticate(_candidate(req))
    if account is None:
        logger.warning("Token generation failed: invalid username or password")
        raise Unauthorized("Invalid username or password")

    return TokenResponse(token=token_service.issue_token(account))
