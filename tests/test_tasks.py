from __future__ import annotations

import pytest

from fieldops.domain.tasks.schemas import JobOrderCreate
from fieldops.domain.tasks.service import TaskService
from fieldops.errors import InvalidStatusTransitionError, NotFoundError, ValidationError


@pytest.fixture()
def task_id(db, tenant, make_payload) -> str:
    result = TaskService(db).create_job_order("c1", JobOrderCreate.model_validate(make_payload()))
    return result.taskId


def test_list_and_get_are_scoped_to_company(db, task_id) -> None:
    service = TaskService(db)

    assert [task.id for task in service.get_tasks("c1")] == [task_id]
    assert service.get_tasks("c2") == []
    assert service.get_task("c1", task_id).assignments[0].user_id == "u1"

    with pytest.raises(NotFoundError):
        service.get_task("c2", task_id)


def test_status_follows_allowed_transitions(db, task_id) -> None:
    service = TaskService(db)

    assert service.update_task_status("c1", task_id, "in_progress").status == "in_progress"
    assert service.update_task_status("c1", task_id, "completed").status == "completed"
    assert service.update_task_status("c1", task_id, "in_progress").status == "in_progress"


def test_same_status_is_a_no_op(db, task_id) -> None:
    assert TaskService(db).update_task_status("c1", task_id, "open").status == "open"


@pytest.mark.parametrize("status", ["completed", "done", "OPEN"])
def test_disallowed_or_unknown_status_is_rejected(db, task_id, status) -> None:
    with pytest.raises(InvalidStatusTransitionError):
        TaskService(db).update_task_status("c1", task_id, status)

    assert TaskService(db).get_task("c1", task_id).status == "open"


def test_cancelled_task_can_only_be_reopened(db, task_id) -> None:
    service = TaskService(db)
    service.update_task_status("c1", task_id, "cancelled")

    with pytest.raises(InvalidStatusTransitionError):
        service.update_task_status("c1", task_id, "in_progress")
    assert service.update_task_status("c1", task_id, "open").status == "open"


def test_blank_status_is_required(db, task_id) -> None:
    with pytest.raises(ValidationError, match="Status is required"):
        TaskService(db).update_task_status("c1", task_id, " ")


def test_instructions_completed_keeps_length(db, task_id) -> None:
    service = TaskService(db)

    task = service.update_instructions_completed("c1", task_id, [True, False])

    assert task.instructions_completed == [True, False]
    assert len(task.instructions_completed) == len(task.instructions)


@pytest.mark.parametrize("flags", [[True], [True, False, True], []])
def test_instructions_completed_with_wrong_length_is_rejected(db, task_id, flags) -> None:
    with pytest.raises(ValidationError, match="exactly 2 entries"):
        TaskService(db).update_instructions_completed("c1", task_id, flags)


def test_instructions_completed_must_be_booleans(db, task_id) -> None:
    with pytest.raises(ValidationError):
        TaskService(db).update_instructions_completed("c1", task_id, ["yes", "no"])
