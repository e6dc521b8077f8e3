from __future__ import annotations

import logging
from threading import RLock
from typing import Dict, List, Optional

from .models import Task, User
from .results import ErrorKind, Result
from .schemas import RegistryStats, TaskOut, UserOut
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TaskRegistry:
    """
    Thread-safe in-memory registry of users and their tasks.

    Every operation, reads included, runs under one re-entrant lock scoped to
    this instance, so concurrent callers observe a single total order of
    mutations. Reads return pydantic snapshots built while the lock is held;
    internal Task/User objects never leave the registry.

    Unknown usernames or task ids are soft failures: the operation returns a
    failed Result and leaves the registry untouched.
    """

    def __init__(self, id_prefix: str = "TASK-", id_width: int = 4) -> None:
        if id_width < 1:
            raise ValueError("id_width must be at least 1")
        self._lock = RLock()
        self._users: Dict[str, User] = {}
        self._tasks: Dict[str, Task] = {}
        self._next_seq = 1
        self._id_prefix = id_prefix
        self._id_width = id_width

    def _format_id(self, seq: int) -> str:
        # width grows past the padding instead of wrapping
        return f"{self._id_prefix}{seq:0{self._id_width}d}"

    def _task_not_found(self, task_id: str) -> Result[None]:
        logger.debug("Task not found id=%s", task_id)
        return Result.failure(ErrorKind.NOT_FOUND, f"Task '{task_id}' not found.")

    @property
    def next_task_id(self) -> str:
        """The id the next successful create_task would issue."""
        with self._lock:
            return self._format_id(self._next_seq)

    # ---- users ----

    def register_user(self, username: str) -> Result[UserOut]:
        with self._lock:
            if username in self._users:
                logger.debug("User already exists username=%s", username)
                return Result.failure(ErrorKind.ALREADY_EXISTS, f"User '{username}' already exists.")
            user = User(username)
            self._users[username] = user
            logger.debug("User registered username=%s", username)
            return Result.success(UserOut.from_entity(user))

    def get_user(self, username: str) -> Optional[UserOut]:
        with self._lock:
            user = self._users.get(username)
            return None if user is None else UserOut.from_entity(user)

    # ---- task mutations ----

    def create_task(self, username: str, description: str, category: str) -> Result[TaskOut]:
        """
        Create a task for an existing user.

        Allocating the id, storing the task and linking it to its owner happen
        in one critical section. The counter is left alone when the user is
        unknown.
        """
        with self._lock:
            user = self._users.get(username)
            if user is None:
                logger.debug("Create rejected, unknown user=%s", username)
                return Result.failure(
                    ErrorKind.NOT_FOUND, f"User '{username}' not found. Please register first."
                )

            seq = self._next_seq
            self._next_seq += 1
            task = Task(self._format_id(seq), description, category, username)
            self._tasks[task.task_id] = task
            user.add_task_id(task.task_id)
            logger.debug("Task created id=%s user=%s category=%s", task.task_id, username, category)
            return Result.success(TaskOut.from_entity(task))

    def update_task_description(self, task_id: str, description: str) -> Result[None]:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return self._task_not_found(task_id)
            task.set_description(description)
            logger.debug("Task description updated id=%s", task_id)
            return Result.success()

    def update_task_category(self, task_id: str, category: str) -> Result[None]:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return self._task_not_found(task_id)
            task.set_category(category)
            logger.debug("Task category updated id=%s category=%s", task_id, category)
            return Result.success()

    def _set_completed(self, task_id: str, completed: bool) -> Result[None]:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return self._task_not_found(task_id)
            task.set_completed(completed)
            logger.debug("Task status changed id=%s status=%s", task_id, task.status)
            return Result.success()

    def complete_task(self, task_id: str) -> Result[None]:
        return self._set_completed(task_id, True)

    def uncomplete_task(self, task_id: str) -> Result[None]:
        return self._set_completed(task_id, False)

    def delete_task(self, task_id: str) -> Result[None]:
        """
        Remove a task and unlink it from its owner.

        A missing owner record is tolerated: the task is still removed.
        """
        with self._lock:
            task = self._tasks.pop(task_id, None)
            if task is None:
                return self._task_not_found(task_id)
            owner = self._users.get(task.assigned_user)
            if owner is not None:
                owner.remove_task_id(task_id)
            else:
                logger.warning("Deleted task id=%s had no owner record user=%s", task_id, task.assigned_user)
            logger.debug("Task deleted id=%s", task_id)
            return Result.success()

    # ---- queries ----

    def get_task(self, task_id: str) -> Optional[TaskOut]:
        with self._lock:
            task = self._tasks.get(task_id)
            return None if task is None else TaskOut.from_entity(task)

    def _user_tasks(self, username: str) -> List[Task]:
        user = self._users.get(username)
        if user is None:
            return []
        return [self._tasks[tid] for tid in user.task_ids if tid in self._tasks]

    def tasks_of(self, username: str) -> List[TaskOut]:
        """Tasks owned by username in creation order; empty for unknown users."""
        with self._lock:
            return [TaskOut.from_entity(t) for t in self._user_tasks(username)]

    def pending_tasks_of(self, username: str) -> List[TaskOut]:
        with self._lock:
            return [TaskOut.from_entity(t) for t in self._user_tasks(username) if not t.completed]

    def completed_tasks_of(self, username: str) -> List[TaskOut]:
        with self._lock:
            return [TaskOut.from_entity(t) for t in self._user_tasks(username) if t.completed]

    def tasks_by_category(self, category: str) -> List[TaskOut]:
        """Case-insensitive exact match on category, in issuance order."""
        wanted = category.lower()
        with self._lock:
            return [TaskOut.from_entity(t) for t in self._tasks.values() if t.category.lower() == wanted]

    def all_tasks(self) -> List[TaskOut]:
        with self._lock:
            return [TaskOut.from_entity(t) for t in self._tasks.values()]

    def all_users(self) -> List[UserOut]:
        with self._lock:
            return [UserOut.from_entity(u) for u in self._users.values()]

    def stats(self) -> RegistryStats:
        with self._lock:
            completed = sum(1 for t in self._tasks.values() if t.completed)
            return RegistryStats(
                total_users=len(self._users),
                total_tasks=len(self._tasks),
                completed=completed,
                pending=len(self._tasks) - completed,
            )


# PUBLIC_INTERFACE
def create_registry(settings: Optional[Settings] = None) -> TaskRegistry:
    """
    Build a new, independent registry configured from settings.
    - settings: explicit Settings, or None to load them from the environment
    """
    settings = settings or get_settings()
    return TaskRegistry(id_prefix=settings.task_id_prefix, id_width=settings.task_id_width)
