# main.py
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasklist.api.endpoints import auth, health, tasks, users
from tasklist.api.errors import http_exception_handler, record_service_error_handler
from tasklist.core.config import Settings, get_settings
from tasklist.core.exceptions import RecordServiceError
from tasklist.core.logging_config import LoggingMiddleware, setup_logging
from tasklist.db.mongo import close_mongo_connection, connect_to_mongo, ensure_indexes

log = structlog.get_logger(__name__)


# [수명 주기 관리] DB 연결 및 해제
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # Startup: 프로세스 수명 동안 유지되는 단일 클라이언트
    client = await connect_to_mongo(settings)
    app.state.mongo_client = client
    app.state.db = client[settings.MONGO_DB_NAME]
    await ensure_indexes(app.state.db)
    yield
    # Shutdown
    await close_mongo_connection(client)


def create_app(settings: Settings | None = None) -> FastAPI:
    # JWT_SECRET_KEY 미설정 시 여기서 ValidationError로 기동 실패
    settings = settings or get_settings()
    setup_logging(settings.LOG_FORMAT, settings.LOG_LEVEL)

    app = FastAPI(title="Task List Backend", lifespan=lifespan)
    app.state.settings = settings

    # --- 미들웨어 설정 ---
    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(LoggingMiddleware)

    # 모든 에러 응답은 {"msg": ...} 형태
    app.add_exception_handler(RecordServiceError, record_service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    @app.get("/")
    async def read_root():
        return {"message": "Backend is running!"}

    app.include_router(users.router)
    app.include_router(auth.router)
    app.include_router(tasks.router)
    app.include_router(health.router)

    return app


def run() -> None:
    settings = get_settings()
    app = create_app(settings)
    log.info("server_starting", url=f"http://localhost:{settings.PORT}", environment=settings.ENVIRONMENT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
