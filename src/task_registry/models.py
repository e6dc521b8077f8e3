from __future__ import annotations

from datetime import datetime
from typing import List, Tuple


# PUBLIC_INTERFACE
class Task:
    """
    A task owned by exactly one user.

    Fields:
    - task_id: Identifier issued by the registry, never changes
    - description / category: Free-form strings, accepted as-is
    - assigned_user: Username of the owner, never reassigned
    - completed: Completion flag (default False)
    - created_at: Construction timestamp
    - updated_at: Last mutation timestamp, always >= created_at

    Mutators are called by the registry while it holds its lock; the entity
    itself does no synchronization.
    """

    def __init__(self, task_id: str, description: str, category: str, assigned_user: str) -> None:
        now = datetime.now()
        self._task_id = task_id
        self._assigned_user = assigned_user
        self._created_at = now
        self._description = description
        self._category = category
        self._completed = False
        self._updated_at = now

    @property
    def task_id(self) -> str:
        return self._task_id

    @property
    def assigned_user(self) -> str:
        return self._assigned_user

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def description(self) -> str:
        return self._description

    @property
    def category(self) -> str:
        return self._category

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def status(self) -> str:
        return "Completed" if self._completed else "Pending"

    def _touch(self) -> None:
        # never move backwards, even if the wall clock does
        self._updated_at = max(datetime.now(), self._updated_at)

    def set_description(self, description: str) -> None:
        self._description = description
        self._touch()

    def set_category(self, category: str) -> None:
        self._category = category
        self._touch()

    def set_completed(self, completed: bool) -> None:
        self._completed = bool(completed)
        self._touch()

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(task_id={self._task_id}, user={self._assigned_user}, status={self.status})"


# PUBLIC_INTERFACE
class User:
    """A registered user and the ordered ids of the tasks it owns."""

    def __init__(self, username: str) -> None:
        self._username = username
        self._task_ids: List[str] = []
        self._created_at = datetime.now()

    @property
    def username(self) -> str:
        return self._username

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def task_ids(self) -> Tuple[str, ...]:
        return tuple(self._task_ids)

    def add_task_id(self, task_id: str) -> None:
        """Append task_id unless it is already present."""
        if task_id not in self._task_ids:
            self._task_ids.append(task_id)

    def remove_task_id(self, task_id: str) -> bool:
        """Remove task_id if present. Return True if something was removed."""
        try:
            self._task_ids.remove(task_id)
        except ValueError:
            return False
        return True

    def has_task(self, task_id: str) -> bool:
        return task_id in self._task_ids

    def task_count(self) -> int:
        return len(self._task_ids)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"User(username={self._username}, tasks={len(self._task_ids)})"
