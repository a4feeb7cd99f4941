"""Shared workflow layer between the CLI and the core.

load_plan turns a line source into a DayPlan; run_schedule walks it,
echoing lines and performing waits on the injected clock.
"""

import logging
from datetime import date
from typing import Callable, Iterable

from .config import Config
from .core.schedule import DayPlan, Mode, ScheduleRunner, Wait, build_plan
from .ports.clock import Clock

logger = logging.getLogger(__name__)


def load_plan(lines: Iterable[str], day: date | None = None) -> DayPlan:
    """Build the day plan. Collisions propagate as TaskCollisionError."""
    plan = build_plan(lines, day)
    logger.info(f"Loaded {len(plan.untimed)} untimed and {len(plan.timed)} scheduled tasks")
    return plan


def header_label(config: Config, day: date | None = None) -> str | None:
    """Resolve the date shown in the header from config."""
    if not config.show_date:
        return None
    day = day or date.today()
    return day.strftime(config.date_format)


def run_schedule(
    plan: DayPlan,
    mode: Mode,
    clock: Clock,
    echo: Callable[[str], None],
    date_label: str | None = None,
) -> int:
    """
    Walk the plan, echoing each line and waiting on the clock in run mode.

    Returns the number of tasks in the plan.
    """
    runner = ScheduleRunner(plan, mode, date_label)
    for step in runner.steps():
        if isinstance(step, Wait):
            logger.info(f"Waiting until {step.deadline:%H:%M} for {step.task.description!r}")
            clock.sleep_until(step.deadline)
        else:
            echo(step)
    return len(plan)
