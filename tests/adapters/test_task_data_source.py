"""Unit tests for SqliteTaskDataSource.

Uses a real SQLite in-memory or temp-file database with the migration schema
applied, so we test the real SQL without touching production data.
"""

from __future__ import annotations

import sqlite3
import threading

import pytest
from pydantic import ValidationError

from todo_local.adapters.sqlite import SqliteTaskDataSource
from todo_local.models import DataNotAvailable, Task, TaskLoaded, TasksLoaded
from todo_local.repositories import TaskDataSource


def _ids(outcome) -> set[str]:
    return {task.id for task in outcome.tasks}


# ---------------------------------------------------------------------------
# get_tasks
# ---------------------------------------------------------------------------


class TestGetTasks:
    def test_fresh_store_is_not_available(self, store):
        outcome = store.get_tasks()
        assert isinstance(outcome, DataNotAvailable)
        assert outcome.available is False

    def test_returns_every_saved_task(self, store):
        tasks = [Task(id=str(i), title=f"Task {i}") for i in range(5)]
        for task in tasks:
            store.save_task(task)

        outcome = store.get_tasks()

        assert isinstance(outcome, TasksLoaded)
        assert outcome.available is True
        assert _ids(outcome) == {t.id for t in tasks}
        assert len(outcome.tasks) == 5

    def test_storage_order(self, store):
        for task_id in ["b", "a", "c"]:
            store.save_task(Task(id=task_id, title=task_id))

        assert [t.id for t in store.get_tasks().tasks] == ["b", "a", "c"]

    def test_not_available_after_last_task_deleted(self, store, milk):
        store.save_task(milk)
        store.delete_task(milk.id)
        assert isinstance(store.get_tasks(), DataNotAvailable)


# ---------------------------------------------------------------------------
# get_task
# ---------------------------------------------------------------------------


class TestGetTask:
    def test_unknown_id_is_not_available(self, store):
        assert isinstance(store.get_task("missing"), DataNotAvailable)

    def test_round_trips_fields(self, store, milk):
        store.save_task(milk)

        outcome = store.get_task("1")

        assert isinstance(outcome, TaskLoaded)
        assert outcome.task == milk

    def test_id_match_is_exact(self, store):
        store.save_task(Task(id="abc", title="x"))
        # LIKE-style wildcards must not match
        assert isinstance(store.get_task("a%"), DataNotAvailable)
        assert isinstance(store.get_task("a_c"), DataNotAvailable)
        assert isinstance(store.get_task("ABC"), DataNotAvailable)

    def test_empty_strings_survive(self, store):
        store.save_task(Task(id="e", title="", description=""))
        task = store.get_task("e").task
        assert task.title == ""
        assert task.description == ""
        assert task.is_empty


# ---------------------------------------------------------------------------
# save_task
# ---------------------------------------------------------------------------


class TestSaveTask:
    def test_same_id_replaces_existing_row(self, store):
        store.save_task(Task(id="dup", title="first"))
        store.save_task(Task(id="dup", title="second", completed=True))

        outcome = store.get_tasks()
        assert len(outcome.tasks) == 1
        assert outcome.tasks[0].title == "second"
        assert outcome.tasks[0].completed is True

        count = store.connection.execute(
            "SELECT COUNT(*) FROM tasks WHERE entryid = ?", ("dup",)
        ).fetchone()[0]
        assert count == 1

    def test_completed_stored_as_integer(self, store):
        store.save_task(Task(id="c", title="x", completed=True))
        raw = store.connection.execute(
            "SELECT completed FROM tasks WHERE entryid = 'c'"
        ).fetchone()[0]
        assert raw == 1


# ---------------------------------------------------------------------------
# complete_task / activate_task
# ---------------------------------------------------------------------------


class TestCompletion:
    def test_complete_by_task(self, store, milk):
        store.save_task(milk)
        store.complete_task(milk)

        task = store.get_task(milk.id).task
        assert task.completed is True
        assert task.title == milk.title
        assert task.description == milk.description

    def test_complete_by_id(self, store, milk):
        store.save_task(milk)
        store.complete_task("1")
        assert store.get_task("1").task.completed is True

    def test_activate_by_task_and_id(self, store):
        store.save_task(Task(id="a", title="a", completed=True))
        store.save_task(Task(id="b", title="b", completed=True))

        store.activate_task(Task(id="a", title="ignored"))
        store.activate_task("b")

        assert store.get_task("a").task.completed is False
        assert store.get_task("b").task.completed is False
        # Only the completed column changes
        assert store.get_task("a").task.title == "a"

    def test_unknown_id_is_silent(self, store, milk):
        store.save_task(milk)
        store.complete_task("missing")
        store.activate_task("missing")
        assert store.get_task("1").task == milk


# ---------------------------------------------------------------------------
# Deletion
# ---------------------------------------------------------------------------


class TestDeletion:
    def test_delete_task(self, store, milk):
        store.save_task(milk)
        store.save_task(Task(id="2", title="Walk dog"))

        store.delete_task("1")

        assert isinstance(store.get_task("1"), DataNotAvailable)
        assert _ids(store.get_tasks()) == {"2"}

    def test_delete_unknown_is_silent(self, store):
        store.delete_task("missing")
        assert isinstance(store.get_tasks(), DataNotAvailable)

    def test_delete_all_tasks(self, store):
        for i in range(3):
            store.save_task(Task(id=str(i), title="x"))
        store.delete_all_tasks()
        assert isinstance(store.get_tasks(), DataNotAvailable)

    def test_clear_completed_keeps_active(self, store):
        store.save_task(Task(id="open", title="open"))
        store.save_task(Task(id="done", title="done", completed=True))

        store.clear_completed_tasks()

        assert _ids(store.get_tasks()) == {"open"}

    def test_refresh_is_noop(self, store, milk):
        store.save_task(milk)
        assert store.refresh_tasks() is None
        assert store.get_task("1").task == milk


# ---------------------------------------------------------------------------
# Scenario from the task lifecycle
# ---------------------------------------------------------------------------


def test_lifecycle_scenario(store):
    store.save_task(Task(id="1", title="Buy milk", description="2%", completed=False))

    task = store.get_task("1").task
    assert (task.title, task.description, task.completed) == ("Buy milk", "2%", False)

    store.complete_task("1")
    assert store.get_task("1").task.completed is True

    store.delete_task("1")
    assert isinstance(store.get_task("1"), DataNotAvailable)


# ---------------------------------------------------------------------------
# Connection handling & errors
# ---------------------------------------------------------------------------


class TestConnectionHandling:
    def test_is_a_task_data_source(self, store):
        assert isinstance(store, TaskDataSource)

    def test_connection_opened_lazily(self, tmp_path):
        db_file = tmp_path / "lazy.db"
        data_source = SqliteTaskDataSource(db_file)
        assert not data_source.database.is_open
        assert not db_file.exists()

        data_source.get_tasks()

        assert data_source.database.is_open
        assert db_file.exists()
        data_source.close()

    def test_connection_reused_across_calls(self, store, milk):
        conn = store.connection
        store.save_task(milk)
        store.get_task("1")
        assert store.connection is conn

    def test_context_manager_closes(self, tmp_path):
        with SqliteTaskDataSource(tmp_path / "ctx.db") as data_source:
            data_source.get_tasks()
            assert data_source.database.is_open
        assert not data_source.database.is_open

    def test_data_persists_across_stores(self, tmp_path, milk):
        db_file = tmp_path / "persist.db"
        with SqliteTaskDataSource(db_file) as first:
            first.save_task(milk)
        with SqliteTaskDataSource(db_file) as second:
            assert second.get_task("1").task == milk

    def test_separate_memory_stores_are_isolated(self, milk):
        with SqliteTaskDataSource(":memory:") as a, SqliteTaskDataSource(":memory:") as b:
            a.save_task(milk)
            assert isinstance(b.get_task("1"), DataNotAvailable)

    def test_driver_errors_propagate(self, store):
        store.connection.execute("DROP TABLE tasks")
        with pytest.raises(sqlite3.OperationalError):
            store.get_tasks()

    def test_malformed_row_propagates(self, store):
        store.connection.execute(
            "INSERT INTO tasks (entryid, title, description, completed) VALUES ('', 't', 'd', 0)"
        )
        store.connection.commit()
        with pytest.raises(ValidationError):
            store.get_task("")

    def test_failed_write_rolls_back(self, store, milk):
        store.save_task(milk)
        with pytest.raises(sqlite3.IntegrityError):
            with store._transaction() as connection:
                connection.execute("DELETE FROM tasks")
                connection.execute(
                    "INSERT INTO tasks (entryid, completed) VALUES ('x', 7)"
                )
        assert store.get_task("1").task == milk

    def test_concurrent_writers(self, tmp_path):
        with SqliteTaskDataSource(tmp_path / "threads.db") as data_source:

            def worker(prefix: str) -> None:
                for i in range(25):
                    data_source.save_task(Task(id=f"{prefix}-{i}", title=prefix))

            threads = [threading.Thread(target=worker, args=(p,)) for p in "abcd"]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

            assert len(data_source.get_tasks().tasks) == 100
