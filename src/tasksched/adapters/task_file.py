"""Task list file adapter."""

from pathlib import Path
from typing import IO, Iterator


class TaskFileError(RuntimeError):
    """The task list file could not be opened or read."""


def open_task_file(path: Path | str) -> IO[str]:
    """Open a task list file for reading."""
    path = Path(path).expanduser()
    try:
        return path.open("r", encoding="utf-8")
    except OSError as e:
        raise TaskFileError(f"Could not open task list file '{path}'") from e


def read_task_lines(stream: IO[str]) -> Iterator[str]:
    """Yield raw lines from a stream without their line endings."""
    try:
        for line in stream:
            yield line.rstrip("\r\n")
    except UnicodeDecodeError as e:
        name = getattr(stream, "name", "<stream>")
        raise TaskFileError(f"Could not read task list file '{name}'") from e
