# 파일 위치: backend/tasklist/models/task.py

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskInDB(BaseModel):
    """
    MongoDB의 'tasks' 컬렉션에 저장되는 완전한 형태의 데이터 모델입니다.
    """
    id: str = Field(..., alias="_id")  # MongoDB의 '_id'를 'id'로 매핑
    content: str
    deadline: datetime
    finished: bool = False  # 현재 어떤 API도 True로 바꾸지 않음

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        return str(v) if v is not None else v
