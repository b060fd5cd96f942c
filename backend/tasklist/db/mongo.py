# backend/tasklist/db/mongo.py
import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from tasklist.core.config import Settings

log = structlog.get_logger(__name__)


async def connect_to_mongo(settings: Settings) -> AsyncIOMotorClient:
    # tz_aware: deadline을 UTC aware datetime으로 돌려받기 위함
    client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    log.info("mongo_connected", db=settings.MONGO_DB_NAME)
    return client


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    email 중복 방지는 애플리케이션 사전 조회가 아니라 unique 인덱스가 최종 보장합니다.
    """
    await db["users"].create_index([("email", ASCENDING)], unique=True)


async def close_mongo_connection(client: AsyncIOMotorClient | None) -> None:
    if client:
        client.close()
        log.info("mongo_connection_closed")
