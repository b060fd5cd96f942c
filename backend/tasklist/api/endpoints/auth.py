# backend/tasklist/api/endpoints/auth.py
from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from starlette.concurrency import run_in_threadpool

from tasklist.api.deps import get_db, get_settings
from tasklist.api.errors import store_errors
from tasklist.core.config import Settings
from tasklist.core.exceptions import UnauthorizedError
from tasklist.core.security import create_access_token, verify_password
from tasklist.crud import users as users_crud
from tasklist.schemas.user import AuthToken, Credentials

router = APIRouter(tags=["Auth"])

# 존재하지 않는 email / 틀린 비밀번호 모두 같은 메시지 (계정 존재 여부 노출 방지)
BAD_CREDENTIALS = "Incorrect email or password"


@router.post("/auth", response_model=AuthToken)
async def login(
    payload: Credentials,
    db: AsyncIOMotorDatabase = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    로그인 후 user id를 담은 JWT 발급.
    NOTE: 발급된 토큰을 검증하는 라우트는 현재 없습니다 (인가 미적용).
    """
    with store_errors("Error while logging in"):
        user = await users_crud.get_user_by_email(db, payload.email)
        if user is None:
            raise UnauthorizedError(BAD_CREDENTIALS)

        if not await run_in_threadpool(verify_password, payload.password, user.password):
            raise UnauthorizedError(BAD_CREDENTIALS)

        token = create_access_token(user.id, settings)

    return AuthToken(token=token, userId=user.id)
