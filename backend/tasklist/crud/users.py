# backend/tasklist/crud/users.py

from typing import List, Optional, Sequence, Union

import structlog
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from tasklist.core.exceptions import ConflictError
from tasklist.crud import tasks as tasks_crud
from tasklist.models.task import TaskInDB
from tasklist.models.user import UserInDB
from tasklist.utils.object_id import safe_object_id

log = structlog.get_logger(__name__)


def get_users_collection(db: AsyncIOMotorDatabase):
    """
    users 컬렉션 핸들. db는 lifespan에서 만든 Motor DB가 의존성으로 주입됩니다.
    """
    return db["users"]


# ---------- READ ----------

async def get_user_by_id(db: AsyncIOMotorDatabase, user_id: Union[str, ObjectId]) -> Optional[UserInDB]:
    oid = safe_object_id(user_id)
    if oid is None:
        return None
    user = await get_users_collection(db).find_one({"_id": oid})
    return UserInDB(**user) if user else None


async def get_user_by_email(db: AsyncIOMotorDatabase, email: str) -> Optional[UserInDB]:
    user = await get_users_collection(db).find_one({"email": email})
    return UserInDB(**user) if user else None


# ---------- CREATE ----------

async def create_user(db: AsyncIOMotorDatabase, *, email: str, password_hash: str) -> UserInDB:
    """
    사전 조회는 흔한 경우를 빠르게 거르는 용도이고,
    동시 가입 경쟁은 email unique 인덱스(DuplicateKeyError)가 최종 판정합니다.
    """
    if await get_user_by_email(db, email) is not None:
        raise ConflictError()

    user_data = {"email": email, "password": password_hash, "tasks": []}
    try:
        result = await get_users_collection(db).insert_one(user_data)
    except DuplicateKeyError as exc:
        raise ConflictError() from exc

    user_data["_id"] = result.inserted_id
    return UserInDB(**user_data)


# ---------- UPDATE (tasks 참조 목록) ----------

async def append_task_refs(
    db: AsyncIOMotorDatabase, user_id: Union[str, ObjectId], task_ids: Sequence[Union[str, ObjectId]]
) -> bool:
    oid = safe_object_id(user_id)
    if oid is None:
        return False
    refs = [safe_object_id(t) for t in task_ids]
    result = await get_users_collection(db).update_one(
        {"_id": oid},
        {"$push": {"tasks": {"$each": refs}}},
    )
    return result.matched_count == 1


async def remove_task_ref(
    db: AsyncIOMotorDatabase, user_id: Union[str, ObjectId], task_id: Union[str, ObjectId]
) -> bool:
    """
    참조가 실제로 있을 때만 $pull (조회 후 수정이 아닌 조건부 단일 업데이트).
    True = 제거됨, False = 유저 또는 참조 없음.
    """
    user_oid = safe_object_id(user_id)
    task_oid = safe_object_id(task_id)
    if user_oid is None or task_oid is None:
        return False

    result = await get_users_collection(db).update_one(
        {"_id": user_oid, "tasks": task_oid},
        {"$pull": {"tasks": task_oid}},
    )
    return result.matched_count == 1


# ---------- POPULATE ----------

async def populate_user_tasks(db: AsyncIOMotorDatabase, user: UserInDB) -> List[TaskInDB]:
    """
    user.tasks 의 id들을 Task 문서로 치환. 순서는 user.tasks 순서를 따르고,
    존재하지 않는 참조(dangling)는 건너뜁니다.
    """
    found = await tasks_crud.get_tasks_by_ids(db, user.tasks)

    populated = []
    for task_id in user.tasks:
        task = found.get(task_id)
        if task is None:
            log.warning("dangling_task_ref", user_id=user.id, task_id=task_id)
            continue
        populated.append(task)
    return populated
