from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Union

import bcrypt
from jose import jwt

from tasklist.core.config import Settings

# bcrypt는 앞 72바이트만 사용 (bcrypt 5.x는 초과 시 ValueError)
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 10) -> str:
    """
    단방향 salted 해시 (bcrypt). 평문 비밀번호는 저장하지 않습니다.
    """
    hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    # checkpw는 내부적으로 constant-time 비교
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # 저장된 값이 bcrypt 해시 형식이 아닌 경우
        return False


def create_access_token(subject: Union[str, Any], settings: Settings) -> str:
    """
    Access Token 생성 (user id를 sub에 담음)
    """
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"exp": expire, "sub": str(subject), "type": "access"}
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    토큰 디코딩. 현재 어떤 라우트도 토큰을 검증하지 않으며 클라이언트/테스트용입니다.
    서명이 틀리거나 만료되면 jose.JWTError가 발생합니다.
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
