"""Pydantic schemas for tasks."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models.task import TaskStatus


class TaskCreateSchema(BaseModel):
    title: str = Field(max_length=255)
    description: str | None = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value


class TaskStatusUpdateSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: TaskStatus


class TaskOutSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    owner_id: int
    created_at: datetime


class MessageSchema(BaseModel):
    message: str
