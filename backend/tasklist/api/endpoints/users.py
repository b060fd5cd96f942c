# backend/tasklist/api/endpoints/users.py
from typing import List

from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from starlette.concurrency import run_in_threadpool

from tasklist.api.deps import get_db, get_settings
from tasklist.api.errors import store_errors
from tasklist.core.config import Settings
from tasklist.core.exceptions import NotFoundError
from tasklist.core.security import hash_password
from tasklist.crud import tasks as tasks_crud
from tasklist.crud import users as users_crud
from tasklist.schemas.common import Message
from tasklist.schemas.task import TaskRead, TasksAdd, TasksAdded
from tasklist.schemas.user import Credentials, UserEmail

router = APIRouter(prefix="/users", tags=["Users"])

USER_NOT_FOUND = "User not found"


# 회원가입
@router.post("", response_model=Message, status_code=status.HTTP_201_CREATED)
async def register(
    payload: Credentials,
    db: AsyncIOMotorDatabase = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    with store_errors("Error while creating the user"):
        # bcrypt는 CPU 작업이라 이벤트 루프 밖에서 실행
        password_hash = await run_in_threadpool(hash_password, payload.password, settings.BCRYPT_ROUNDS)
        await users_crud.create_user(db, email=payload.email, password_hash=password_hash)
    return Message(msg="User created successfully")


# 마감일 오름차순 할 일 목록 (/{user_id}/email 보다 먼저 등록)
@router.get("/tasks/{user_id}", response_model=List[TaskRead])
async def read_sorted_tasks(user_id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    with store_errors("Error while retrieving the user's tasks"):
        user = await users_crud.get_user_by_id(db, user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)
        tasks = await users_crud.populate_user_tasks(db, user)

    # sorted는 stable: 같은 마감일이면 user.tasks(삽입) 순서 유지
    return [TaskRead.model_validate(t) for t in sorted(tasks, key=lambda t: t.deadline)]


@router.get("/{user_id}/email", response_model=UserEmail)
async def read_user_email(user_id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    with store_errors("Error while retrieving the user's email"):
        user = await users_crud.get_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return UserEmail(email=user.email)


# 할 일 일괄 추가
@router.post("/{user_id}/tasks", response_model=TasksAdded, status_code=status.HTTP_201_CREATED)
async def add_tasks(
    user_id: str,
    payload: TasksAdd,
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    with store_errors("Error while adding tasks to the user"):
        user = await users_crud.get_user_by_id(db, user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)

        created = await tasks_crud.create_tasks_batch(db, payload.task)
        await users_crud.append_task_refs(db, user.id, [t.id for t in created])

    return TasksAdded(
        msg="Tasks added to the user successfully",
        tasks=[TaskRead.model_validate(t) for t in created],
    )
