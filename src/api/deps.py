from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.adapters.auth.crypto import PasslibPasswordHasher
from src.adapters.clock import SystemClock
from src.adapters.sqlite.repos import SQLitePortRepo, SQLiteTerminalRepo, SQLiteUserRepo
from src.app_shell.config import Settings, load_settings
from src.components.accounts import AccountService
from src.components.port_catalog import PortCatalogService
from src.components.terminals import TerminalService
from src.components.tokens import TokenClaims, TokenService


# --- Settings ---
@lru_cache
def get_settings() -> Settings:
    return load_settings()


# --- Repos ---
def get_port_repo(settings: Settings = Depends(get_settings)) -> SQLitePortRepo:
    return SQLitePortRepo(settings.database.path)


def get_terminal_repo(settings: Settings = Depends(get_settings)) -> SQLiteTerminalRepo:
    return SQLiteTerminalRepo(settings.database.path)


def get_user_repo(settings: Settings = Depends(get_settings)) -> SQLiteUserRepo:
    return SQLiteUserRepo(settings.database.path)


# --- Adapters ---
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


def get_password_hasher() -> PasslibPasswordHasher:
    return PasslibPasswordHasher()


# --- Services ---
def get_port_catalog_service(
    port_repo: SQLitePortRepo = Depends(get_port_repo),
    terminal_repo: SQLiteTerminalRepo = Depends(get_terminal_repo),
    clock: SystemClock = Depends(get_clock),
) -> PortCatalogService:
    return PortCatalogService(port_repo=port_repo, terminal_repo=terminal_repo, clock=clock)


def get_terminal_service(
    terminal_repo: SQLiteTerminalRepo = Depends(get_terminal_repo),
    port_repo: SQLitePortRepo = Depends(get_port_repo),
    clock: SystemClock = Depends(get_clock),
) -> TerminalService:
    return TerminalService(terminal_repo=terminal_repo, port_repo=port_repo, clock=clock)


def get_account_service(
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    hasher: PasslibPasswordHasher = Depends(get_password_hasher),
) -> AccountService:
    return AccountService(user_repo=user_repo, hasher=hasher)


def get_token_service(
    settings: Settings = Depends(get_settings),
    clock: SystemClock = Depends(get_clock),
) -> TokenService:
    return TokenService(settings.jwt, clock)


# --- Auth ---
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_account(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: TokenService = Depends(get_token_service),
) -> TokenClaims:
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    claims = token_service.validate_token(credentials.credentials)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return claims
