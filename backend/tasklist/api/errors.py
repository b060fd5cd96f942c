# backend/tasklist/api/errors.py
from contextlib import contextmanager

import structlog
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasklist.core.exceptions import InternalError, RecordServiceError

log = structlog.get_logger(__name__)


@contextmanager
def store_errors(msg: str):
    """
    핸들러 경계: 도메인 에러는 그대로 통과시키고,
    그 외 예외(DB 장애 등)는 로그를 남긴 뒤 고정 메시지의 500으로 변환합니다.
    """
    try:
        yield
    except (RecordServiceError, HTTPException):
        raise
    except Exception as exc:
        log.exception("handler_failed", error=str(exc), response_msg=msg)
        raise InternalError(msg) from exc


async def record_service_error_handler(request: Request, exc: RecordServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.msg})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": exc.detail},
        headers=getattr(exc, "headers", None),
    )
