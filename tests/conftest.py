"""
Shared fixtures: a throwaway SQLite database per test and an HTTP client
bound to the real app through ``httpx.ASGITransport``.
"""

import os

# Settings are read at import time; these must be in place before any app
# module is imported.
os.environ.setdefault("JWT_SECRET", "test-only-signing-secret-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import httpx
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from database.session import get_db_session, init_models


@pytest_asyncio.fixture
async def engine(tmp_path):
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'todo.db'}")
    await init_models(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def app(session_factory):
    from main import create_app

    application = create_app()

    async def _test_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = _test_session
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def register_user(
    client: httpx.AsyncClient,
    name: str = "Ana",
    email: str = "ana@x.com",
    password: str = "secret123",
) -> httpx.Response:
    return await client.post(
        "/register", json={"name": name, "email": email, "password": password}
    )


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
