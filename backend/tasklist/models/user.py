# 파일 위치: backend/tasklist/models/user.py

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserInDB(BaseModel):
    """
    MongoDB의 'users' 컬렉션에 저장되는 User 모델입니다.
    password는 bcrypt 해시만 저장합니다.
    """
    id: str = Field(..., alias="_id")
    email: str
    password: str

    # Task _id 목록 (약한 참조). Task 삭제 시 여기서도 직접 제거해야 합니다.
    tasks: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        return str(v) if v is not None else v

    @field_validator("tasks", mode="before")
    @classmethod
    def stringify_task_ids(cls, v):
        if v is None:
            return []
        return [str(t) for t in v]
