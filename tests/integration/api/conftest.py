from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from src.api.deps import get_settings
from src.api.main import app
from src.app_shell.config import DatabaseSettings, JwtSettings, Settings
from src.components.tokens import TokenService
from src.domain.entities import UserInfo
from tests.conftest import TEST_SIGNING_KEY, FixedClock


@pytest.fixture
def settings(db_path, migrations_dir):
    return Settings(
        jwt=JwtSettings(key=TEST_SIGNING_KEY),
        database=DatabaseSettings(path=db_path, migrations_dir=migrations_dir),
    )


@pytest.fixture
def client(settings):
    """Client bound to a freshly migrated temp database."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(settings):
    # jose checks exp/nbf against the wall clock, so issue at the real time
    account = UserInfo(username="tester", email="tester@example.com", password_hash="-")
    token = TokenService(settings.jwt, FixedClock(datetime.now(UTC))).issue_token(account)
    return {"Authorization": f"Bearer {token}"}
