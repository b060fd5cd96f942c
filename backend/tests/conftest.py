"""tests 공통 fixture -- 가짜 Mongo DB + httpx AsyncClient"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tasklist.core.config import Settings
from tasklist.db.mongo import ensure_indexes
from tasklist.main import create_app

from fakes import FakeDatabase


@pytest.fixture()
def settings() -> Settings:
    # .env 무시, bcrypt 최소 cost 로 테스트 속도 확보
    return Settings(_env_file=None, JWT_SECRET_KEY="test-secret", BCRYPT_ROUNDS=4)


@pytest_asyncio.fixture
async def db() -> FakeDatabase:
    fake = FakeDatabase()
    await ensure_indexes(fake)
    return fake


@pytest_asyncio.fixture
async def app(settings: Settings, db: FakeDatabase):
    """lifespan 을 거치지 않고 가짜 DB 를 직접 주입"""
    application = create_app(settings)
    application.state.db = db
    return application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def registered_user(client: AsyncClient) -> dict:
    """가입 + 로그인 완료된 유저 (email, password, userId, token)"""
    creds = {"email": "alice@example.com", "password": "s3cret"}
    resp = await client.post("/users", json=creds)
    assert resp.status_code == 201
    resp = await client.post("/auth", json=creds)
    assert resp.status_code == 200
    return {**creds, **resp.json()}
