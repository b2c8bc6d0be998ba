from app.services.auth import AuthService
from app.services.tasks import TaskStore
from app.services.users import UserStore

__all__ = ["AuthService", "TaskStore", "UserStore"]
