# 파일 위치: backend/tasklist/schemas/task.py

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from tasklist.schemas.common import strip_and_reject_blank


def as_utc(value: datetime) -> datetime:
    # naive datetime은 UTC로 간주
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# --- API 요청(Request) 스키마 ---
class TaskItem(BaseModel):
    """
    [요청] POST /users/{userId}/tasks 의 task 배열 원소
    """
    content: str
    deadline: datetime

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        # 빈 값만 거부하고 내용은 보낸 그대로 저장
        strip_and_reject_blank(v, "content")
        return v

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v: datetime) -> datetime:
        return as_utc(v)


class TasksAdd(BaseModel):
    """
    [요청] POST /users/{userId}/tasks
    {"task": [{"content": "...", "deadline": "..."}]}
    """
    task: List[TaskItem]


# --- API 응답(Response) 스키마 ---
class TaskRead(BaseModel):
    id: str
    content: str
    deadline: datetime
    finished: bool = False

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("deadline")
    def serialize_deadline(self, v: datetime) -> str:
        # 항상 절대 시각(UTC, Z 표기)으로 직렬화
        return as_utc(v).isoformat().replace("+00:00", "Z")


class TasksAdded(BaseModel):
    msg: str
    tasks: List[TaskRead] = Field(default_factory=list)
