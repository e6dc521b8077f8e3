from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List

from .schemas import RegistryStats, TaskOut

RULE = "=" * 50


def format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S")


# PUBLIC_INTERFACE
def render_task(task: TaskOut) -> str:
    """One-line summary of a task."""
    return (
        f"Task[ID={task.id}, User={task.assigned_user}, Description={task.description}, "
        f"Category={task.category}, Status={task.status}]"
    )


# PUBLIC_INTERFACE
def render_task_detail(task: TaskOut) -> str:
    """Multi-line block with every field of the task."""
    lines = [
        f"Task ID: {task.id}",
        f"User: {task.assigned_user}",
        f"Description: {task.description}",
        f"Category: {task.category}",
        f"Status: {task.status}",
        f"Created: {format_timestamp(task.created_at)}",
        f"Updated: {format_timestamp(task.updated_at)}",
    ]
    return "\n".join(lines)


# PUBLIC_INTERFACE
def render_user_tasks(username: str, tasks: Iterable[TaskOut]) -> str:
    """
    Render the task listing of one user.

    Args:
        username: Owner whose tasks are listed.
        tasks: Snapshots as returned by TaskRegistry.tasks_of.

    Returns:
        A header followed by one detail block per task, or a single
        "No tasks found" line when the user has none.
    """
    materialized: List[TaskOut] = list(tasks)
    if not materialized:
        return f"No tasks found for user '{username}'."
    parts = [RULE, f"Tasks for User: {username}", RULE]
    parts.extend(render_task_detail(t) + "\n" for t in materialized)
    return "\n".join(parts)


# PUBLIC_INTERFACE
def render_stats(stats: RegistryStats) -> str:
    return "\n".join(
        [
            RULE,
            "System Statistics",
            RULE,
            f"Total Users: {stats.total_users}",
            f"Total Tasks: {stats.total_tasks}",
            f"Completed Tasks: {stats.completed}",
            f"Pending Tasks: {stats.pending}",
            RULE,
        ]
    )


# PUBLIC_INTERFACE
def stats_envelope(stats: RegistryStats) -> Dict[str, int]:
    """
    Build the plain reporting envelope for external consumers.

    Returns:
        Dict with keys: totalUsers, totalTasks, completed, pending.
    """
    return {
        "totalUsers": int(stats.total_users),
        "totalTasks": int(stats.total_tasks),
        "completed": int(stats.completed),
        "pending": int(stats.pending),
    }
