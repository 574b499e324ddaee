"""Tests for TaskService."""

from __future__ import annotations

import asyncio
import threading
from unittest.mock import MagicMock

import pytest

from todo_local.models import DataNotAvailable, Task, TaskLoaded, TasksLoaded
from todo_local.repositories import TaskDataSource
from todo_local.services.task_service import TaskService


@pytest.fixture
def service(store):
    return TaskService(store)


@pytest.mark.asyncio
async def test_list_empty_is_not_available(service):
    assert isinstance(await service.list_tasks(), DataNotAvailable)


@pytest.mark.asyncio
async def test_add_task_generates_id_and_stores(service):
    task = await service.add_task("Buy milk", "2%")

    outcome = await service.get_task(task.id)
    assert isinstance(outcome, TaskLoaded)
    assert outcome.task == task


@pytest.mark.asyncio
async def test_add_empty_task_rejected(service):
    with pytest.raises(ValueError, match="title or a description"):
        await service.add_task("", "")
    assert isinstance(await service.list_tasks(), DataNotAvailable)


@pytest.mark.asyncio
async def test_status_filters(service):
    await service.save_task(Task(id="open", title="open"))
    await service.save_task(Task(id="done", title="done", completed=True))

    active = await service.list_tasks(status="active")
    completed = await service.list_tasks(status="completed")
    everything = await service.list_tasks(status="all")

    assert [t.id for t in active.tasks] == ["open"]
    assert [t.id for t in completed.tasks] == ["done"]
    assert len(everything.tasks) == 2


@pytest.mark.asyncio
async def test_filter_matching_nothing_is_not_available(service):
    await service.save_task(Task(id="open", title="open"))
    assert isinstance(await service.list_tasks(status="completed"), DataNotAvailable)


@pytest.mark.asyncio
async def test_unknown_status_rejected(service):
    with pytest.raises(ValueError, match="Unknown status"):
        await service.list_tasks(status="someday")


@pytest.mark.asyncio
async def test_lifecycle(service, milk):
    await service.save_task(milk)
    await service.complete_task("1")
    assert (await service.get_task("1")).task.completed is True

    await service.activate_task(milk)
    assert (await service.get_task("1")).task.completed is False

    await service.complete_task(milk)
    await service.clear_completed_tasks()
    assert isinstance(await service.get_task("1"), DataNotAvailable)


@pytest.mark.asyncio
async def test_delete_and_delete_all(service):
    for i in range(3):
        await service.save_task(Task(id=str(i), title="x"))

    await service.delete_task("0")
    assert {t.id for t in (await service.list_tasks()).tasks} == {"1", "2"}

    await service.refresh_tasks()
    await service.delete_all_tasks()
    assert isinstance(await service.list_tasks(), DataNotAvailable)


@pytest.mark.asyncio
async def test_concurrent_saves(service):
    await asyncio.gather(
        *(service.save_task(Task(id=str(i), title=f"t{i}")) for i in range(20))
    )
    outcome = await service.list_tasks()
    assert isinstance(outcome, TasksLoaded)
    assert len(outcome.tasks) == 20


@pytest.mark.asyncio
async def test_calls_run_off_the_event_loop_thread():
    loop_thread = threading.get_ident()
    seen = []

    data_source = MagicMock(spec=TaskDataSource)
    data_source.get_tasks.side_effect = lambda: seen.append(threading.get_ident()) or DataNotAvailable()

    await TaskService(data_source).list_tasks()

    assert seen and seen[0] != loop_thread


@pytest.mark.asyncio
async def test_data_source_errors_propagate():
    data_source = MagicMock(spec=TaskDataSource)
    data_source.delete_task.side_effect = RuntimeError("disk gone")

    with pytest.raises(RuntimeError, match="disk gone"):
        await TaskService(data_source).delete_task("1")
