from datetime import datetime, timedelta

import pytest

from task_registry import models
from task_registry.models import Task, User


class TestTask:
    def test_defaults(self):
        task = Task("TASK-0001", "Write docs", "Work", "Alice")
        assert task.task_id == "TASK-0001"
        assert task.assigned_user == "Alice"
        assert task.completed is False
        assert task.status == "Pending"
        assert task.updated_at >= task.created_at

    def test_mutators_touch_updated_at(self):
        task = Task("TASK-0001", "Write docs", "Work", "Alice")
        stamps = [task.updated_at]

        task.set_description("Write better docs")
        stamps.append(task.updated_at)
        task.set_category("Personal")
        stamps.append(task.updated_at)
        task.set_completed(True)
        stamps.append(task.updated_at)

        assert task.description == "Write better docs"
        assert task.category == "Personal"
        assert task.status == "Completed"
        assert stamps == sorted(stamps)
        assert stamps[0] >= task.created_at

    def test_accepts_arbitrary_strings(self):
        task = Task("TASK-0001", "", "", "Alice")
        task.set_category("  weird CATEGORY ")
        assert task.description == ""
        assert task.category == "  weird CATEGORY "

    def test_updated_at_never_moves_backwards(self, monkeypatch):
        task = Task("TASK-0001", "Write docs", "Work", "Alice")
        before = task.updated_at
        earlier = before - timedelta(hours=1)

        class SteppedBackClock(datetime):
            @classmethod
            def now(cls, tz=None):
                return earlier

        monkeypatch.setattr(models, "datetime", SteppedBackClock)
        task.set_description("Write better docs")
        task.set_completed(True)

        assert task.description == "Write better docs"
        assert task.updated_at == before
        assert task.updated_at >= task.created_at

    @pytest.mark.parametrize("field", ["description", "category", "completed", "updated_at"])
    def test_mutable_fields_only_change_through_setters(self, field):
        task = Task("TASK-0001", "Write docs", "Work", "Alice")
        with pytest.raises(AttributeError):
            setattr(task, field, None)


class TestUser:
    def test_add_is_idempotent_and_ordered(self):
        user = User("Alice")
        user.add_task_id("TASK-0002")
        user.add_task_id("TASK-0001")
        user.add_task_id("TASK-0002")
        assert user.task_ids == ("TASK-0002", "TASK-0001")
        assert user.task_count() == 2
        assert user.has_task("TASK-0001")

    def test_remove_absent_is_noop(self):
        user = User("Alice")
        user.add_task_id("TASK-0001")
        assert user.remove_task_id("TASK-0009") is False
        assert user.remove_task_id("TASK-0001") is True
        assert user.task_ids == ()
        assert not user.has_task("TASK-0001")

    def test_task_ids_is_a_copy(self):
        user = User("Alice")
        ids = user.task_ids
        user.add_task_id("TASK-0001")
        assert ids == ()
