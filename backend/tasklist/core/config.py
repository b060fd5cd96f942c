from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # 서버
    HOST: str = "0.0.0.0"
    PORT: int = 7000
    ENVIRONMENT: str = "development"
    CORS_ORIGINS: List[str] = []

    # MongoDB (MONGO_URI가 있으면 DB_HOST/MONGO_PORT보다 우선)
    DB_HOST: str = "localhost"
    MONGO_PORT: int = 27017
    MONGO_DB_NAME: str = "myapp"
    MONGO_URI: Optional[str] = None

    # 인증: 서명 키는 기본값 없음 (없으면 기동 실패)
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 1일
    BCRYPT_ROUNDS: int = 10

    # 로깅
    LOG_FORMAT: str = "dev"
    LOG_LEVEL: str = "INFO"

    @property
    def mongo_uri(self) -> str:
        if self.MONGO_URI:
            return self.MONGO_URI
        return f"mongodb://{self.DB_HOST}:{self.MONGO_PORT}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
