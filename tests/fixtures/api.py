"""API test fixtures."""

from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient, Timeout
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.config import settings
from app.core.db import get_session
from app.core.security import create_session_token, hash_password
from app.database.models import UserModel

# Default timeout configuration
DEFAULT_TIMEOUT: Timeout = Timeout(timeout=5.0, connect=2.0)

TEST_PASSWORD = "correct-horse"

UserFactory = Callable[..., Awaitable[UserModel]]


@pytest.fixture(scope="function")
def upload_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the upload root at a temporary directory."""
    root = tmp_path / "uploads"
    monkeypatch.setattr(settings, "FILE_UPLOAD_DIR", str(root))
    return root


@pytest.fixture(scope="function")
def test_app(
    db_session_factory: async_sessionmaker[AsyncSession],
) -> Generator[FastAPI, None, None]:
    """The application wired to the test database.

    Lifespan handlers do not run under the ASGI transport, so nothing touches
    the configured database.
    """
    from app.main import app

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with db_session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Anonymous HTTP client.

    Yields:
        AsyncClient bound to the test application
    """
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
        timeout=DEFAULT_TIMEOUT,
    ) as ac:
        yield ac


@pytest.fixture(scope="function")
def create_user(db_session: AsyncSession) -> UserFactory:
    """Factory storing a user with ``TEST_PASSWORD``."""

    async def factory(
        email: str = "admin@example.com", role: str = "admin", **kwargs: Any
    ) -> UserModel:
        user = UserModel(
            email=email,
            password_hash=hash_password(kwargs.pop("password", TEST_PASSWORD)),
            role=role,
            **kwargs,
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user

    return factory


@pytest_asyncio.fixture(scope="function")
async def admin_user(create_user: UserFactory) -> UserModel:
    return await create_user("admin@example.com", "admin")


@pytest_asyncio.fixture(scope="function")
async def editor_user(create_user: UserFactory) -> UserModel:
    return await create_user("editor@example.com", "editor")


def login_as(client: AsyncClient, user: UserModel) -> AsyncClient:
    """Attach a valid session cookie for ``user`` to the client."""
    client.cookies.set(settings.SESSION_COOKIE_NAME, create_session_token(user.id))
    return client


@pytest_asyncio.fixture(scope="function")
async def admin_client(client: AsyncClient, admin_user: UserModel) -> AsyncClient:
    """Client signed in as an admin."""
    return login_as(client, admin_user)


@pytest_asyncio.fixture(scope="function")
async def editor_client(client: AsyncClient, editor_user: UserModel) -> AsyncClient:
    """Client signed in as an editor."""
    return login_as(client, editor_user)
