"""Adapters - I/O implementations of ports."""

from .system_clock import SystemClock
from .task_file import TaskFileError, open_task_file, read_task_lines

__all__ = [
    "SystemClock",
    "TaskFileError",
    "open_task_file",
    "read_task_lines",
]
