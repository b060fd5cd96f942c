from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from tasklist.core.config import Settings


def get_db(request: Request) -> AsyncIOMotorDatabase:
    """
    lifespan에서 app.state에 올려둔 Motor DB 핸들을 반환합니다.
    테스트에서는 app.state.db를 가짜 DB로 바꿔 끼웁니다.
    """
    return request.app.state.db


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
