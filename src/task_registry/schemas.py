from __future__ import annotations

from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from .models import Task, User


# PUBLIC_INTERFACE
class TaskOut(BaseModel):
    """
    Immutable snapshot of a Task as returned by the registry.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "TASK-0001",
                "description": "Complete project proposal",
                "category": "Work",
                "assigned_user": "Alice",
                "completed": False,
                "status": "Pending",
                "created_at": "2025-01-25T10:15:30.123456",
                "updated_at": "2025-01-25T10:15:30.123456",
            }
        },
    )

    id: str = Field(..., description="Task identifier issued by the registry")
    description: str = Field(..., description="Free-form description")
    category: str = Field(..., description="Free-form category label")
    assigned_user: str = Field(..., description="Username of the owning user")
    completed: bool = Field(..., description="Completion status flag")
    status: str = Field(..., description="'Completed' or 'Pending'")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_entity(cls, task: Task) -> "TaskOut":
        return cls(
            id=task.task_id,
            description=task.description,
            category=task.category,
            assigned_user=task.assigned_user,
            completed=task.completed,
            status=task.status,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


# PUBLIC_INTERFACE
class UserOut(BaseModel):
    """
    Immutable snapshot of a User.
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field(..., description="Unique username")
    task_ids: Tuple[str, ...] = Field(default=(), description="Owned task ids in creation order")
    task_count: int = Field(..., description="Number of owned tasks")
    created_at: datetime = Field(..., description="Registration timestamp")

    @classmethod
    def from_entity(cls, user: User) -> "UserOut":
        ids = user.task_ids
        return cls(username=user.username, task_ids=ids, task_count=len(ids), created_at=user.created_at)


# PUBLIC_INTERFACE
class RegistryStats(BaseModel):
    """Aggregate counters taken from one consistent view of the registry."""

    model_config = ConfigDict(frozen=True)

    total_users: int = Field(..., ge=0)
    total_tasks: int = Field(..., ge=0)
    completed: int = Field(..., ge=0)
    pending: int = Field(..., ge=0)
