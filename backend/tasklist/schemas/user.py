# backend/tasklist/schemas/user.py

from pydantic import BaseModel, field_validator

from tasklist.schemas.common import strip_and_reject_blank


class Credentials(BaseModel):
    """
    [요청] POST /users, POST /auth
    형식 검증은 하지 않고 존재 여부(빈 값 아님)만 확인합니다.
    """
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return strip_and_reject_blank(v, "email")

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        # 비밀번호는 원문 그대로 해시해야 하므로 strip 결과는 버림
        strip_and_reject_blank(v, "password")
        return v


class UserEmail(BaseModel):
    email: str


class AuthToken(BaseModel):
    token: str
    userId: str
