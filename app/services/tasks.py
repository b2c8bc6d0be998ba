"""Task store: every query is filtered by owner in the same statement as the id."""
from __future__ import annotations

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.task import Task, TaskStatus


class TaskStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self, owner_id: int) -> list[Task]:
        """All of the owner's tasks, newest first."""
        result = await self.db.execute(
            select(Task)
            .where(Task.owner_id == owner_id)
            .order_by(Task.created_at.desc(), Task.id.desc())
        )
        return list(result.scalars().all())

    async def get(self, owner_id: int, task_id: int) -> Task | None:
        result = await self.db.execute(
            select(Task).where(Task.id == task_id, Task.owner_id == owner_id)
        )
        return result.scalar_one_or_none()

    async def create(self, owner_id: int, title: str, description: str | None = None) -> Task:
        task = Task(
            owner_id=owner_id,
            title=title,
            description=description,
            status=TaskStatus.PENDING.value,
        )
        self.db.add(task)
        await self.db.commit()
        await self.db.refresh(task)
        return task

    async def update_status(self, owner_id: int, task_id: int, status: TaskStatus) -> Task | None:
        """Conditional write; None when the task is missing or owned by someone else."""
        result = await self.db.execute(
            update(Task)
            .where(Task.id == task_id, Task.owner_id == owner_id)
            .values(status=TaskStatus(status).value)
            .returning(Task)
        )
        task = result.scalar_one_or_none()
        await self.db.commit()
        return task

    async def delete(self, owner_id: int, task_id: int) -> bool:
        result = await self.db.execute(
            delete(Task)
            .where(Task.id == task_id, Task.owner_id == owner_id)
        )
        await self.db.commit()
        return result.rowcount > 0
