"""tasksched CLI - Daily task lister and scheduler."""

import logging
import sys
from datetime import date

import click

from .adapters.system_clock import SystemClock
from .adapters.task_file import TaskFileError, open_task_file, read_task_lines
from .config import load_config
from .core.schedule import Mode
from .core.tasks import TaskCollisionError
from .workflows import header_label, load_plan, run_schedule


@click.command()
@click.version_option(package_name="tasksched")
@click.argument("taskfile", required=False)
@click.option("--run", "-r", "run_mode", is_flag=True, help="Wait in real time between scheduled tasks")
@click.option("--no-date", is_flag=True, help="Omit today's date from the header")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(taskfile: str | None, run_mode: bool, no_date: bool, debug: bool):
    """List today's tasks from TASKFILE (or stdin), optionally running them on schedule.

    One task per line, optionally prefixed with an H:MM time.
    """
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    taskfile = taskfile or config.task_file or "-"
    today = date.today()

    try:
        try:
            if taskfile == "-":
                plan = load_plan(read_task_lines(sys.stdin), today)
            else:
                with open_task_file(taskfile) as stream:
                    plan = load_plan(read_task_lines(stream), today)
        except (TaskFileError, TaskCollisionError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        mode = Mode.RUN if run_mode else Mode.LIST
        label = None if no_date else header_label(config, today)
        clock = SystemClock(max_step=config.max_sleep_step)

        run_schedule(plan, mode, clock, click.echo, label)
    except KeyboardInterrupt:
        click.echo("\nStopped.", err=True)
        sys.exit(130)
