"""Functional core - pure business logic with no I/O."""

from .tasks import (
    Ordering,
    Task,
    TaskCollisionError,
    classify,
    compare_tasks,
    find_collisions,
    order_timed,
    parse_line,
    parse_lines,
    parse_time,
)
from .schedule import DayPlan, Mode, RunnerState, ScheduleRunner, Wait, build_plan

__all__ = [
    # Tasks
    "Task",
    "TaskCollisionError",
    "Ordering",
    "parse_time",
    "parse_line",
    "parse_lines",
    "classify",
    "compare_tasks",
    "find_collisions",
    "order_timed",
    # Schedule
    "DayPlan",
    "Mode",
    "RunnerState",
    "ScheduleRunner",
    "Wait",
    "build_plan",
]
