"""Task tracker - turn free-text command lines into to-dos, deadlines and events."""

__version__ = "0.1.0"
__author__ = "Task Tracker Team"

from .task import Task, TaskType, ToDo, Deadline, Event
from .exceptions import (
    TaskTrackerError,
    TaskParseError,
    EmptyTaskError,
    MissingTimeError,
    InvalidDeadlineError,
    InvalidEventError,
    InvalidTaskError,
)

__all__ = [
    "Task",
    "TaskType",
    "ToDo",
    "Deadline",
    "Event",
    "TaskTrackerError",
    "TaskParseError",
    "EmptyTaskError",
    "MissingTimeError",
    "InvalidDeadlineError",
    "InvalidEventError",
    "InvalidTaskError",
    "__version__",
]
