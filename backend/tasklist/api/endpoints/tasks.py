# backend/tasklist/api/endpoints/tasks.py
from datetime import timedelta

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from tasklist.api.deps import get_db
from tasklist.api.errors import store_errors
from tasklist.core.exceptions import BadRequestError, NotFoundError
from tasklist.crud import tasks as tasks_crud
from tasklist.crud import users as users_crud
from tasklist.schemas.common import Message

router = APIRouter(tags=["Tasks"])


# DELETE: 유저 목록에서 참조를 먼저 빼고 Task 문서를 삭제
@router.delete("/{user_id}/tasks/{task_id}", response_model=Message)
async def remove_user_task(user_id: str, task_id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    with store_errors("Error while removing the task from the user"):
        user = await users_crud.get_user_by_id(db, user_id)
        if user is None:
            raise NotFoundError("User not found")

        removed = await users_crud.remove_task_ref(db, user.id, task_id)
        if not removed:
            raise NotFoundError("Task not found for this user")

        await tasks_crud.delete_task(db, task_id)

    return Message(msg="Task removed from the user successfully")


# 마감일 +1일
@router.put("/tasks/{task_id}/deadline", response_model=Message)
async def extend_deadline(task_id: str, db: AsyncIOMotorDatabase = Depends(get_db)):
    with store_errors("Error while extending the task deadline"):
        task = await tasks_crud.get_task(db, task_id)
        if task is None:
            raise NotFoundError("Task not found")

        try:
            new_deadline = task.deadline + timedelta(days=1)
        except OverflowError:
            # datetime 상한(9999-12-31)을 넘는 경우
            raise BadRequestError("Task deadline cannot be extended further")

        await tasks_crud.update_task_deadline(db, task.id, new_deadline)

    return Message(msg="Task deadline extended successfully")
