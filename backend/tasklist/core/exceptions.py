# backend/tasklist/core/exceptions.py

from fastapi import status


class RecordServiceError(Exception):
    """
    핸들러 경계에서 {"msg": ...} 응답으로 변환되는 도메인 에러의 기반 클래스.
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_msg: str = "Internal server error"

    def __init__(self, msg: str | None = None):
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class NotFoundError(RecordServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_msg = "Not found"


class ConflictError(RecordServiceError):
    # 기존 API와의 호환을 위해 중복 이메일은 400으로 응답
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "User already exists"


class UnauthorizedError(RecordServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_msg = "Incorrect email or password"


class InternalError(RecordServiceError):
    pass


class BadRequestError(RecordServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Bad request"
