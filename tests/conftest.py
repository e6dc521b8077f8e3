import pytest

from task_registry import TaskRegistry


@pytest.fixture()
def registry() -> TaskRegistry:
    """A fresh registry per test; registries share no state."""
    return TaskRegistry()


@pytest.fixture()
def alice_registry(registry: TaskRegistry) -> TaskRegistry:
    assert registry.register_user("Alice")
    return registry
