from app.schemas.auth import CredentialsSchema, LoginUserSchema, TokenOutSchema, UserOutSchema
from app.schemas.task import MessageSchema, TaskCreateSchema, TaskOutSchema, TaskStatusUpdateSchema

__all__ = [
    "CredentialsSchema",
    "LoginUserSchema",
    "TokenOutSchema",
    "UserOutSchema",
    "MessageSchema",
    "TaskCreateSchema",
    "TaskOutSchema",
    "TaskStatusUpdateSchema",
]
