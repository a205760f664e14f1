"""Task model for the task tracker.

Three kinds of task exist: plain to-dos, deadlines and events. They share one
contract (status, name, due date and the display/store/update strings) and
are told apart by their :class:`TaskType` tag.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

from .utils.datetime import (
    DEFAULT_DISPLAY_FORMAT,
    format_display_timestamp,
    format_store_timestamp,
)

STORE_DELIMITER = "/@/"


class TaskType(Enum):
    """Task kinds, valued by their single-character storage tag."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass
class Task(ABC):
    """Fields and behaviour shared by every kind of task."""

    name: str
    done: bool = False

    task_type = None  # overridden by each concrete task

    def status(self) -> bool:
        """Return True if the task is completed."""
        return self.done

    def get_name(self) -> str:
        return self.name

    def mark_done(self):
        """Mark the task as completed."""
        self.done = True

    def mark_undone(self):
        """Mark the task as not completed."""
        self.done = False

    @abstractmethod
    def due(self) -> Optional[datetime]:
        """Return the timestamp used to order the task, or None if it has none."""

    @abstractmethod
    def time_fields(self) -> List[datetime]:
        """Return the task's timestamps in storage order."""

    def describe_time(self, fmt: str = DEFAULT_DISPLAY_FORMAT) -> str:
        """Return the bracketed time suffix shown after the name."""
        return ""

    def display_string(self, fmt: str = DEFAULT_DISPLAY_FORMAT) -> str:
        """Return the line shown to the user, e.g. ``[D][X] return book (by: ...)``."""
        marker = "X" if self.done else " "
        line = f"[{self.task_type.value}][{marker}] {self.name}"
        suffix = self.describe_time(fmt)
        if suffix:
            line += f" ({suffix})"
        return line

    def store_string(self) -> str:
        """Return the ``/@/`` delimited record written to the data file."""
        return self.update_string(1 if self.done else 0)

    def update_string(self, new_status: int) -> str:
        """Return the store record with the status field replaced by ``new_status``."""
        fields = [self.task_type.value, str(new_status), self.name]
        fields.extend(format_store_timestamp(dt) for dt in self.time_fields())
        return STORE_DELIMITER.join(fields)

    def __str__(self) -> str:
        return self.display_string()


@dataclass
class ToDo(Task):
    """A task without any date attached."""

    task_type = TaskType.TODO

    def due(self) -> Optional[datetime]:
        return None

    def time_fields(self) -> List[datetime]:
        return []


@dataclass
class Deadline(Task):
    """A task that has to be finished by a given date and time."""

    by: Optional[datetime] = None

    task_type = TaskType.DEADLINE

    def __post_init__(self):
        if self.by is None:
            raise ValueError("A deadline needs a due date")

    def due(self) -> Optional[datetime]:
        return self.by

    def time_fields(self) -> List[datetime]:
        return [self.by]

    def describe_time(self, fmt: str = DEFAULT_DISPLAY_FORMAT) -> str:
        return f"by: {format_display_timestamp(self.by, fmt)}"


@dataclass
class Event(Task):
    """A task that takes place between a start and an end time."""

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    task_type = TaskType.EVENT

    def __post_init__(self):
        if self.start is None or self.end is None:
            raise ValueError("An event needs a start and an end")
        if self.start > self.end:
            raise ValueError("An event cannot end before it starts")

    def due(self) -> Optional[datetime]:
        return self.start

    def time_fields(self) -> List[datetime]:
        return [self.start, self.end]

    def describe_time(self, fmt: str = DEFAULT_DISPLAY_FORMAT) -> str:
        return (
            f"from: {format_display_timestamp(self.start, fmt)} "
            f"to: {format_display_timestamp(self.end, fmt)}"
        )
