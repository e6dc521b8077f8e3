"""
In-process registry of users and the tasks assigned to them.

The registry is safe to share between threads: every operation runs under a
lock owned by the registry instance, and reads return immutable snapshots.
"""

from .models import Task, User
from .registry import TaskRegistry, create_registry
from .results import ErrorKind, Failure, Result
from .schemas import RegistryStats, TaskOut, UserOut
from .settings import Settings, get_settings

__all__ = [
    "ErrorKind",
    "Failure",
    "RegistryStats",
    "Result",
    "Settings",
    "Task",
    "TaskOut",
    "TaskRegistry",
    "User",
    "UserOut",
    "create_registry",
    "get_settings",
]
