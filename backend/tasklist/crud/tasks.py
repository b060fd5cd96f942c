# backend/tasklist/crud/tasks.py
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Union

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from tasklist.models.task import TaskInDB
from tasklist.schemas.task import TaskItem, as_utc
from tasklist.utils.object_id import safe_object_id


def get_tasks_collection(db: AsyncIOMotorDatabase):
    return db["tasks"]


# CREATE (batch)
async def create_tasks_batch(db: AsyncIOMotorDatabase, items: List[TaskItem]) -> List[TaskInDB]:
    """
    ordered insert이므로 반환 순서 = 요청 순서. _id는 DB가 발급합니다.
    """
    if not items:
        return []

    docs = [
        {"content": item.content, "deadline": as_utc(item.deadline), "finished": False}
        for item in items
    ]
    result = await get_tasks_collection(db).insert_many(docs, ordered=True)
    return [
        TaskInDB(**{**doc, "_id": inserted_id})
        for doc, inserted_id in zip(docs, result.inserted_ids)
    ]


# READ ONE
async def get_task(db: AsyncIOMotorDatabase, task_id: Union[str, ObjectId]) -> Optional[TaskInDB]:
    oid = safe_object_id(task_id)
    if oid is None:
        return None
    doc = await get_tasks_collection(db).find_one({"_id": oid})
    return TaskInDB(**doc) if doc else None


# READ MANY (populate용)
async def get_tasks_by_ids(
    db: AsyncIOMotorDatabase, task_ids: Iterable[Union[str, ObjectId]]
) -> Dict[str, TaskInDB]:
    oids = [oid for oid in (safe_object_id(t) for t in task_ids) if oid is not None]
    if not oids:
        return {}
    cursor = get_tasks_collection(db).find({"_id": {"$in": oids}})
    return {str(doc["_id"]): TaskInDB(**doc) async for doc in cursor}


# UPDATE
async def update_task_deadline(
    db: AsyncIOMotorDatabase, task_id: Union[str, ObjectId], deadline: datetime
) -> bool:
    oid = safe_object_id(task_id)
    if oid is None:
        return False
    result = await get_tasks_collection(db).update_one(
        {"_id": oid},
        {"$set": {"deadline": as_utc(deadline)}},
    )
    return result.matched_count == 1


# DELETE (없으면 no-op)
async def delete_task(db: AsyncIOMotorDatabase, task_id: Union[str, ObjectId]) -> bool:
    oid = safe_object_id(task_id)
    if oid is None:
        return False
    result = await get_tasks_collection(db).delete_one({"_id": oid})
    return result.deleted_count == 1
