"""API test fixtures - FastAPI test client bound to the per-test database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - auth_header issues tokens with the same secret the app verifies against
"""

import pytest
from httpx import ASGITransport, AsyncClient

import coinshop.infrastructure.database as db_module
from coinshop.config import get_settings
from coinshop.infrastructure.database import DatabaseSessionManager, get_db
from coinshop.infrastructure.security import TokenCodec
from coinshop.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def app_codec() -> TokenCodec:
    settings = get_settings()
    return TokenCodec(
        settings.jwt_secret_key,
        settings.jwt_algorithm,
        settings.access_token_expire_minutes,
    )


@pytest.fixture
def auth_header(app_codec):
    """Authorization header for an existing username."""
    def _header(username: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {app_codec.issue(username)}"}
    return _header
