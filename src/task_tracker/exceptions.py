"""Exceptions raised by the task tracker."""

from typing import List, Optional


class TaskTrackerError(Exception):
    """Base class for all task tracker errors."""

    default_message = "Something went wrong."

    def __init__(self, message: Optional[str] = None, suggestions: List[str] = None):
        self.message = message or self.default_message
        self.suggestions = suggestions or []
        super().__init__(self.message)


class TaskParseError(TaskTrackerError):
    """Raised when a command line cannot be turned into a task or argument."""

    default_message = "That command could not be understood."


class EmptyTaskError(TaskParseError):
    """Raised when a command is missing its task name or task number."""

    default_message = "The description or task number cannot be empty."

    def __init__(self, message: Optional[str] = None, suggestions: List[str] = None):
        super().__init__(message, suggestions or [
            "todo <name>",
            "mark <task number>",
        ])


class MissingTimeError(TaskParseError):
    """Raised when a deadline or event is missing its time marker or value."""

    default_message = "Please add a time using /by, or /from and /to."

    def __init__(self, message: Optional[str] = None, suggestions: List[str] = None):
        super().__init__(message, suggestions or [
            "deadline <name> /by YYYY-MM-DD HHMM",
            "event <name> /from YYYY-MM-DD HHMM /to YYYY-MM-DD HHMM",
        ])


class InvalidDeadlineError(TaskParseError):
    """Raised when a deadline's date or time does not follow the grammar."""

    default_message = "Deadlines must look like /by YYYY-MM-DD HHMM."


class InvalidEventError(TaskParseError):
    """Raised when an event's times are malformed or start after they end."""

    default_message = (
        "Events must look like /from YYYY-MM-DD HHMM /to YYYY-MM-DD HHMM "
        "and cannot end before they start."
    )


class InvalidTaskError(TaskParseError):
    """Raised when a command argument is missing or is not what was expected."""

    default_message = "That is not a valid task or keyword."


class TaskNotFoundError(TaskTrackerError):
    """Raised when a task number does not refer to a task in the list."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        if size:
            message = f"There is no task {index}. Pick a number from 1 to {size}."
        else:
            message = f"There is no task {index}. Your list is empty."
        super().__init__(message)


class StorageFormatError(TaskTrackerError):
    """Raised when a stored record cannot be turned back into a task."""

    def __init__(self, message: str, line: str):
        self.line = line
        super().__init__(message)
