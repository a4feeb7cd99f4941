"""Tests for the shared workflow layer."""

from datetime import date, datetime, timedelta

import pytest

from tasksched.config import Config
from tasksched.core.schedule import FINISHED_MESSAGE, Mode
from tasksched.core.tasks import TaskCollisionError
from tasksched.workflows import header_label, load_plan, run_schedule


class FakeClock:
    """In-memory Clock that jumps straight to each deadline."""

    def __init__(self, start: datetime):
        self.current = start
        self.waits: list[datetime] = []

    def now(self) -> datetime:
        return self.current

    def sleep_until(self, deadline: datetime) -> None:
        self.waits.append(deadline)
        if deadline > self.current:
            self.current = deadline

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def today():
    return date(2025, 1, 15)


class TestLoadPlan:
    def test_collision_aborts(self, today):
        with pytest.raises(TaskCollisionError):
            load_plan(["7:00 Breakfast", "7:00 Bath"], today)

    def test_accepts_any_iterable(self, today):
        lines = (line for line in ["Buy groceries", "6:00 Wake up"])
        plan = load_plan(lines, today)
        assert len(plan) == 2


class TestHeaderLabel:
    def test_formats_date(self, today):
        assert header_label(Config(date_format="%Y-%m-%d"), today) == "2025-01-15"

    def test_hidden(self, today):
        assert header_label(Config(show_date=False), today) is None


class TestRunSchedule:
    def test_list_mode_never_waits(self, today):
        plan = load_plan(["6:00 Wake up", "7:00 Breakfast"], today)
        clock = FakeClock(datetime(2025, 1, 15, 5, 0))
        out: list[str] = []

        count = run_schedule(plan, Mode.LIST, clock, out.append)

        assert count == 2
        assert clock.waits == []
        assert "06:00 -- Wake up" in out
        assert out[-1] == FINISHED_MESSAGE

    def test_waits_on_absolute_deadlines(self, today):
        plan = load_plan(["6:00 Wake up", "7:00 Breakfast", "7:30 Commute"], today)
        clock = FakeClock(datetime(2025, 1, 15, 6, 0))
        out: list[str] = []

        run_schedule(plan, Mode.RUN, clock, out.append)

        assert clock.waits == [
            datetime(2025, 1, 15, 7, 0),
            datetime(2025, 1, 15, 7, 30),
        ]

    def test_deadlines_ignore_time_spent_echoing(self, today):
        plan = load_plan(["6:00 Wake up", "7:00 Breakfast", "8:00 Commute"], today)
        clock = FakeClock(datetime(2025, 1, 15, 6, 0))

        def slow_echo(line: str) -> None:
            clock.advance(minutes=7)

        run_schedule(plan, Mode.RUN, clock, slow_echo)

        assert clock.waits == [
            datetime(2025, 1, 15, 7, 0),
            datetime(2025, 1, 15, 8, 0),
        ]

    def test_overdue_tasks_run_back_to_back(self, today):
        plan = load_plan(["6:00 Wake up", "7:00 Breakfast"], today)
        clock = FakeClock(datetime(2025, 1, 15, 9, 0))
        out: list[str] = []

        run_schedule(plan, Mode.RUN, clock, out.append)

        assert clock.current == datetime(2025, 1, 15, 9, 0)
        doing = [line for line in out if line.startswith("currently doing")]
        assert doing == [
            "currently doing: 06:00 -- Wake up",
            "currently doing: 07:00 -- Breakfast",
        ]

    def test_nothing_to_do(self, today):
        plan = load_plan([], today)
        out: list[str] = []
        assert run_schedule(plan, Mode.RUN, FakeClock(datetime(2025, 1, 15)), out.append) == 0
        assert out[-1] == "Nothing to do today! Relax & enjoy!"
