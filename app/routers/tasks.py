"""Task routes: CRUD over the caller's own tasks."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.gate import current_user_id
from app.db.session import get_db
from app.schemas.task import (
    MessageSchema,
    TaskCreateSchema,
    TaskOutSchema,
    TaskStatusUpdateSchema,
)
from app.services.tasks import TaskStore

router = APIRouter(prefix="/tasks", tags=["tasks"])

UserId = Annotated[int, Depends(current_user_id)]


async def get_task_store(
    user_id: UserId,  # resolved first: rejected requests never open a session
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TaskStore:
    return TaskStore(db)


Store = Annotated[TaskStore, Depends(get_task_store)]


@router.get("", response_model=list[TaskOutSchema])
async def list_tasks(user_id: UserId, store: Store):
    """All tasks of the caller, newest first."""
    return await store.list(user_id)


@router.post("", response_model=TaskOutSchema, status_code=201)
async def create_task(body: TaskCreateSchema, user_id: UserId, store: Store):
    return await store.create(user_id, body.title, body.description)


@router.get("/{task_id}", response_model=TaskOutSchema | None)
async def get_task(task_id: int, user_id: UserId, store: Store):
    return await store.get(user_id, task_id)


@router.put("/{task_id}", response_model=TaskOutSchema | None)
async def update_task_status(
    task_id: int,
    body: TaskStatusUpdateSchema,
    user_id: UserId,
    store: Store,
):
    """Only status can change. Unknown or foreign ids give null."""
    return await store.update_status(user_id, task_id, body.status)


@router.delete("/{task_id}", response_model=MessageSchema)
async def delete_task(task_id: int, user_id: UserId, store: Store):
    await store.delete(user_id, task_id)
    return MessageSchema(message="Task deleted successfully")
