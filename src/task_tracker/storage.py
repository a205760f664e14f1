"""Flat-file storage for tasks, one ``/@/`` delimited record per line."""

import logging
from pathlib import Path
from typing import Iterable, List

from .config import ConfigModel
from .exceptions import StorageFormatError
from .task import STORE_DELIMITER, Deadline, Event, Task, TaskType, ToDo
from .utils.datetime import parse_timestamp

logger = logging.getLogger(__name__)

STATUS_VALUES = {"0": False, "1": True}


def _check_name(name: str, line: str) -> str:
    if not name.strip():
        raise StorageFormatError("Task record has an empty name", line)
    return name


class TaskStoreFormat:
    """Handles conversion between Task objects and stored records."""

    @staticmethod
    def to_store_line(task: Task) -> str:
        """Convert a task to its stored record."""
        return task.store_string()

    @staticmethod
    def from_store_line(line: str) -> Task:
        """Parse a stored record back into a task.

        Tag and status are read from the left and timestamps from the right,
        so names that contain the delimiter survive a round trip.

        Raises:
            StorageFormatError: If the record is not a valid task
        """
        parts = line.split(STORE_DELIMITER, 2)
        if len(parts) != 3:
            raise StorageFormatError(f"Expected at least 3 fields in {line!r}", line)

        tag, status, rest = parts
        try:
            task_type = TaskType(tag)
        except ValueError:
            raise StorageFormatError(f"Unknown task type {tag!r}", line) from None

        if status not in STATUS_VALUES:
            raise StorageFormatError(f"Status must be 0 or 1, got {status!r}", line)
        done = STATUS_VALUES[status]

        try:
            if task_type is TaskType.TODO:
                return ToDo(name=_check_name(rest, line), done=done)

            if task_type is TaskType.DEADLINE:
                fields = rest.rsplit(STORE_DELIMITER, 1)
                if len(fields) != 2:
                    raise StorageFormatError("Deadline record has no due date", line)
                name, by = fields
                _check_name(name, line)
                return Deadline(name=name, done=done, by=parse_timestamp(by))

            fields = rest.rsplit(STORE_DELIMITER, 2)
            if len(fields) != 3:
                raise StorageFormatError("Event record needs a start and an end", line)
            name, start, end = fields
            _check_name(name, line)
            return Event(name=name, done=done,
                         start=parse_timestamp(start), end=parse_timestamp(end))
        except ValueError as err:
            raise StorageFormatError(f"Invalid record {line!r}: {err}", line) from err


class Storage:
    """File-based storage for the task list."""

    def __init__(self, config: ConfigModel):
        self.config = config

    @property
    def path(self) -> Path:
        return self.config.get_data_path()

    def load(self) -> List[Task]:
        """Load all tasks from the data file.

        A missing file is an empty list. Records that cannot be parsed are
        logged and skipped so one bad line does not lose the rest.
        """
        if not self.path.exists():
            logger.debug("No data file at %s, starting with an empty list", self.path)
            return []

        tasks = []
        with open(self.path, "rb") as f:
            for line_no, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8").rstrip("\r\n")
                except UnicodeDecodeError as e:
                    logger.warning("Skipping line %d of %s: not valid UTF-8 (%s)",
                                   line_no, self.path, e)
                    continue
                if not line.strip():
                    continue
                try:
                    tasks.append(TaskStoreFormat.from_store_line(line))
                except StorageFormatError as e:
                    logger.warning("Skipping line %d of %s: %s", line_no, self.path, e)

        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Write all tasks to the data file, replacing its contents."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        lines = [TaskStoreFormat.to_store_line(task) for task in tasks]
        with open(self.path, "w", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
        logger.debug("Saved %d tasks to %s", len(lines), self.path)
