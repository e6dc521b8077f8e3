"""
Demonstration harness for the task registry.

Runs a scripted CRUD walkthrough and then drives the same registry from a
thread pool, with random delays between calls, to show that concurrent
callers never collide on task ids or lose updates.

Usage:
    python -m task_registry.demo
"""
from __future__ import annotations

import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional, Sequence, Tuple

from .logging_setup import setup_logging
from .registry import TaskRegistry, create_registry
from .reporting import render_stats, render_user_tasks
from .results import Result
from .schemas import RegistryStats
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

DEMO_USERS: Tuple[str, ...] = ("Alice", "Bob", "Charlie")

CONCURRENT_WORK: Tuple[Tuple[str, str, str], ...] = (
    ("Alice", "Implement user authentication", "Work"),
    ("Bob", "Write unit tests", "Work"),
    ("Charlie", "Update documentation", "Work"),
    ("Alice", "Schedule team meeting", "Work"),
    ("Bob", "Code review for PR #123", "Work"),
)


def _log_result(action: str, result: Result[Any]) -> None:
    if result:
        logger.info("%s: ok", action)
    else:
        logger.info("%s: %s", action, result.error.message)


def _show_user(registry: TaskRegistry, username: str) -> None:
    logger.info("\n%s", render_user_tasks(username, registry.tasks_of(username)))


def run_basic_operations(registry: TaskRegistry) -> None:
    """Scripted walkthrough of every mutating operation."""
    for name in DEMO_USERS:
        _log_result(f"register {name}", registry.register_user(name))
    _log_result("register Alice again", registry.register_user("Alice"))

    created = [
        registry.create_task("Alice", "Complete project proposal", "Work"),
        registry.create_task("Alice", "Review code changes", "Work"),
        registry.create_task("Alice", "Buy groceries", "Personal"),
        registry.create_task("Bob", "Prepare presentation", "Work"),
        registry.create_task("Bob", "Call dentist", "Personal"),
        registry.create_task("Charlie", "Fix bug in authentication", "Work"),
    ]
    for result in created:
        _log_result(f"create {result.value.id if result else '?'}", result)
    _log_result("create for Zoe", registry.create_task("Zoe", "Unowned", "Misc"))

    ids = [r.value.id for r in created if r]
    _show_user(registry, "Alice")

    _log_result(f"update {ids[0]}", registry.update_task_description(ids[0], "Complete and submit project proposal"))
    _log_result(f"recategorize {ids[2]}", registry.update_task_category(ids[2], "Shopping"))
    _log_result(f"complete {ids[0]}", registry.complete_task(ids[0]))
    _log_result(f"complete {ids[3]}", registry.complete_task(ids[3]))
    _show_user(registry, "Alice")

    _log_result(f"delete {ids[2]}", registry.delete_task(ids[2]))
    _show_user(registry, "Alice")


def _worker(
    registry: TaskRegistry,
    username: str,
    description: str,
    category: str,
    max_delay_ms: int,
    rng: random.Random,
) -> Optional[str]:
    # delays happen outside the registry; only the calls themselves are serialized
    time.sleep(rng.randint(0, max_delay_ms) / 1000.0)
    result = registry.create_task(username, description, category)
    if not result:
        return None
    time.sleep(rng.randint(0, max_delay_ms) / 1000.0)
    if rng.random() < 0.5:
        registry.complete_task(result.value.id)
    return result.value.id


def run_concurrent_operations(
    registry: TaskRegistry,
    settings: Settings,
    work: Sequence[Tuple[str, str, str]] = CONCURRENT_WORK,
    seed: Optional[int] = None,
) -> List[str]:
    """
    Run the concurrent create/complete burst followed by concurrent updates.

    Returns the ids created by the burst, in submission order.
    """
    seeder = random.Random(seed)
    max_delay = settings.demo_max_delay_ms
    logger.info("Starting concurrent operations with %d workers", settings.demo_workers)

    with ThreadPoolExecutor(max_workers=settings.demo_workers) as pool:
        futures = [
            pool.submit(_worker, registry, user, desc, cat, max_delay, random.Random(seeder.random()))
            for user, desc, cat in work
        ]
        created = [f.result() for f in futures]
    ids = [tid for tid in created if tid is not None]
    logger.info("Concurrent creates finished: %d tasks", len(ids))

    if len(ids) >= 4:
        def complete_pair() -> None:
            registry.complete_task(ids[0])
            registry.complete_task(ids[2])

        with ThreadPoolExecutor(max_workers=3) as pool:
            pool.submit(complete_pair)
            pool.submit(registry.update_task_description, ids[1], "Write comprehensive unit tests")
            pool.submit(registry.update_task_category, ids[3], "Meeting")
        logger.info("Concurrent updates finished")

    for name in ("Alice", "Bob"):
        _show_user(registry, name)
    return ids


def run_demo(registry: Optional[TaskRegistry] = None, settings: Optional[Settings] = None) -> RegistryStats:
    settings = settings or get_settings()
    registry = registry or create_registry(settings)

    logger.info("PART 1: Basic CRUD operations")
    run_basic_operations(registry)

    logger.info("PART 2: Concurrent operations")
    run_concurrent_operations(registry, settings)

    stats = registry.stats()
    logger.info("\n%s", render_stats(stats))
    return stats


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    run_demo(settings=settings)


if __name__ == "__main__":
    main()
