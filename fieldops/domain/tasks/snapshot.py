"""Point-in-time task content and schedule fields for new tasks"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from dateutil.parser import isoparse

from ...errors import ValidationError
from ...models import TaskDetail
from .schemas import ScheduleInput


@dataclass(frozen=True)
class TaskSnapshot:
    """Template content frozen into a task at creation time"""

    category_id: Optional[str]
    category_name: Optional[str]
    task_detail_title: str
    instructions: list[str] = field(default_factory=list)
    instructions_completed: list[bool] = field(default_factory=list)

    def as_columns(self) -> dict:
        return {
            "category_id": self.category_id,
            "category_name": self.category_name,
            "task_detail_title": self.task_detail_title,
            "instructions": list(self.instructions),
            "instructions_completed": list(self.instructions_completed),
        }


def build_task_snapshot(task_detail: TaskDetail) -> TaskSnapshot:
    # Copy, never alias, the template's list
    instructions = [str(item) for item in (task_detail.instructions or [])]
    return TaskSnapshot(
        category_id=task_detail.category_id,
        category_name=task_detail.category_name,
        task_detail_title=task_detail.title,
        instructions=instructions,
        instructions_completed=[False] * len(instructions),
    )


def _parse_date(value: Optional[str], field_name: str) -> Optional[date]:
    if not value:
        return None
    try:
        return isoparse(value).date()
    except (ValueError, OverflowError) as e:
        raise ValidationError(
            f"Invalid {field_name} format, expected an ISO date", details={"field": field_name}
        ) from e


def build_schedule_fields(schedule: ScheduleInput) -> dict:
    """
    Task scheduling columns.

    Disabling the schedule clears every sub-field, whatever the caller sent.
    Repeat settings are recorded only; occurrences are never materialized.
    """
    if not schedule.enabled:
        return {
            "schedule_enabled": False,
            "shift_type": None,
            "scheduled_date": None,
            "start_time": None,
            "end_time": None,
            "is_repeating": False,
            "repeat_frequency": None,
            "repeat_end_date": None,
        }

    repeating = schedule.repeating.enabled
    return {
        "schedule_enabled": True,
        "shift_type": schedule.shiftType or None,
        "scheduled_date": _parse_date(schedule.date, "schedule.date"),
        "start_time": schedule.startTime or None,
        "end_time": schedule.endTime or None,
        "is_repeating": repeating,
        "repeat_frequency": (schedule.repeating.frequency or None) if repeating else None,
        "repeat_end_date": (
            _parse_date(schedule.repeating.endDate, "schedule.repeating.endDate")
            if repeating
            else None
        ),
    }
