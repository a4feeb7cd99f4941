"""Pure day-schedule logic - builds the plan and walks it, no I/O."""

from collections import deque
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Iterator

from .tasks import Task, classify, order_timed, parse_lines

FINISHED_MESSAGE = "You have finished all your tasks, congratulations! You've earned it!"
NOTHING_TO_DO_MESSAGE = "Nothing to do today! Relax & enjoy!"


class Mode(Enum):
    """How the schedule is walked."""

    LIST = "list"  # Enumerate tasks only
    RUN = "run"  # Wait in real time between scheduled tasks


class RunnerState(Enum):
    IDLE = "idle"
    ANNOUNCING = "announcing"
    EMITTING_UNTIMED = "emitting_untimed"
    EMITTING_TIMED = "emitting_timed"
    DONE = "done"


@dataclass
class DayPlan:
    """Tasks for one day, ready to be listed or run."""

    untimed: list[Task] = field(default_factory=list)
    timed: list[Task] = field(default_factory=list)

    @property
    def has_tasks(self) -> bool:
        return bool(self.untimed or self.timed)

    def __len__(self) -> int:
        return len(self.untimed) + len(self.timed)


@dataclass(frozen=True)
class Wait:
    """Instruction to suspend until the wall clock reaches deadline."""

    deadline: datetime
    task: Task


def build_plan(lines: Iterable[str], day: date | None = None) -> DayPlan:
    """
    Parse, classify and order raw task lines.

    Raises TaskCollisionError before anything is emitted when two different
    tasks share a time.
    """
    untimed, timed = classify(parse_lines(lines, day))
    return DayPlan(untimed=untimed, timed=order_timed(timed))


def format_header(date_label: str | None = None, mode: Mode = Mode.LIST) -> str:
    """Format the schedule banner."""
    parts = ["Tasks for Today"]
    if date_label:
        parts.append(date_label)
    if mode is Mode.RUN:
        parts.append("[Run mode]")
    return f"==== {', '.join(parts)} ===="


class ScheduleRunner:
    """
    Walks a DayPlan, yielding display lines and Wait instructions.

    State moves IDLE -> ANNOUNCING -> EMITTING_UNTIMED -> EMITTING_TIMED -> DONE.
    The runner never sleeps; whoever consumes steps() performs the waits.
    """

    def __init__(self, plan: DayPlan, mode: Mode = Mode.LIST, date_label: str | None = None):
        self.plan = plan
        self.mode = mode
        self.date_label = date_label
        self.state = RunnerState.IDLE

    def steps(self) -> Iterator[str | Wait]:
        self.state = RunnerState.ANNOUNCING
        yield format_header(self.date_label, self.mode)
        yield ""

        self.state = RunnerState.EMITTING_UNTIMED
        if self.plan.untimed:
            yield "To do:"
            yield "------"
            for task in self.plan.untimed:
                yield task.render()
            yield ""

        self.state = RunnerState.EMITTING_TIMED
        if self.plan.timed:
            yield "Scheduled tasks:"
            yield "----------------"
            if self.mode is Mode.RUN:
                yield from self._run_timed()
            else:
                for task in self.plan.timed:
                    yield task.render()
            yield ""

        self.state = RunnerState.DONE
        yield FINISHED_MESSAGE if self.plan.has_tasks else NOTHING_TO_DO_MESSAGE

    def _run_timed(self) -> Iterator[str | Wait]:
        pending = deque(self.plan.timed)
        while pending:
            yield f"currently doing: {pending.popleft().render()}"
            if not pending:
                break
            upcoming = pending[0]
            yield f"the next task will be: {upcoming.render()}"
            yield Wait(deadline=upcoming.timestamp, task=upcoming)

