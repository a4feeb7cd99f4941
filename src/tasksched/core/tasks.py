"""Pure task domain logic - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Iterable

_TIME_PATTERN = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


@dataclass(frozen=True)
class Task:
    """A task with an optional fixed time of day."""

    timestamp: datetime | None
    description: str

    @property
    def is_timed(self) -> bool:
        return self.timestamp is not None

    def render(self) -> str:
        """Format the task for display."""
        description = self.description or "n/a"
        if self.timestamp is None:
            return description
        return f"{self.timestamp.strftime('%H:%M')} -- {description}"

    def __str__(self) -> str:
        return self.render()


class Ordering(Enum):
    """Result of comparing two timed tasks."""

    BEFORE = "before"
    AFTER = "after"
    SAME = "same"  # Equal timestamp, identical description
    COLLISION = "collision"  # Equal timestamp, different description


class TaskCollisionError(ValueError):
    """Two different tasks are scheduled at the same time."""

    def __init__(self, timestamp: datetime, first: Task, second: Task):
        self.timestamp = timestamp
        self.first = first
        self.second = second
        super().__init__(
            f'Tasks "{first.description}" and "{second.description}" '
            f"are both scheduled at {timestamp.strftime('%H:%M')}"
        )


def parse_time(token: str, day: date | None = None) -> datetime | None:
    """
    Parse an H:MM or HH:MM 24-hour clock time anchored to a day.

    Returns None when the token is not a valid time.
    """
    match = _TIME_PATTERN.match(token)
    if not match:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        return None
    day = day or date.today()
    return datetime.combine(day, time(hour, minute))


def parse_line(line: str, day: date | None = None) -> Task | None:
    """
    Parse one raw line into a Task.

    A leading time token makes the task timed; anything else is kept as the
    description of an untimed task. Lines without a description yield None.
    Pure function - no I/O.
    """
    text = line.lstrip()
    parts = text.split(None, 1)
    if not parts:
        return None

    timestamp = parse_time(parts[0], day)
    if timestamp is not None:
        description = parts[1].rstrip() if len(parts) > 1 else ""
    else:
        description = text.rstrip()

    if not description:
        return None
    return Task(timestamp=timestamp, description=description)


def parse_lines(lines: Iterable[str], day: date | None = None) -> list[Task]:
    """Parse every line, dropping blank and description-less ones."""
    day = day or date.today()
    tasks = []
    for line in lines:
        task = parse_line(line.rstrip("\r\n"), day)
        if task is not None:
            tasks.append(task)
    return tasks


def classify(tasks: Iterable[Task]) -> tuple[list[Task], list[Task]]:
    """
    Split tasks into untimed and timed buckets.

    Returns: (untimed_tasks, timed_tasks), each in input order.
    Pure function - no I/O.
    """
    untimed: list[Task] = []
    timed: list[Task] = []
    for task in tasks:
        (timed if task.is_timed else untimed).append(task)
    return untimed, timed


def compare_tasks(a: Task, b: Task) -> Ordering:
    """Compare two timed tasks by timestamp, flagging same-time mismatches."""
    if a.timestamp < b.timestamp:
        return Ordering.BEFORE
    if a.timestamp > b.timestamp:
        return Ordering.AFTER
    if a.description == b.description:
        return Ordering.SAME
    return Ordering.COLLISION


def find_collisions(tasks: list[Task]) -> list[tuple[Task, Task]]:
    """
    Find pairs of different tasks sharing a timestamp.

    Expects tasks sorted by timestamp, so equal timestamps are adjacent.
    Pure function - no I/O.
    """
    collisions = []
    for first, second in zip(tasks, tasks[1:]):
        if compare_tasks(first, second) is Ordering.COLLISION:
            collisions.append((first, second))
    return collisions


def order_timed(tasks: list[Task]) -> list[Task]:
    """
    Sort timed tasks by timestamp (ascending).

    Raises TaskCollisionError if two tasks share a timestamp but not a
    description. Exact duplicates are kept.
    """
    ordered = sorted(tasks, key=lambda t: t.timestamp)
    collisions = find_collisions(ordered)
    if collisions:
        first, second = collisions[0]
        raise TaskCollisionError(first.timestamp, first, second)
    return ordered
