"""Command line parser for the task tracker.

Each ``parse_*`` function takes the whole line typed by the user, keyword
included, and returns either a task or the argument the command needs. A
malformed line raises exactly one :class:`~task_tracker.exceptions.TaskParseError`
subclass describing the first problem found.
"""

import logging
import re
from datetime import datetime
from typing import Iterable, Optional, Tuple, Type

from fuzzywuzzy import fuzz, process

from .exceptions import (
    EmptyTaskError,
    InvalidDeadlineError,
    InvalidEventError,
    InvalidTaskError,
    MissingTimeError,
    TaskParseError,
)
from .task import Deadline, Event, ToDo
from .utils.datetime import parse_timestamp_tokens

logger = logging.getLogger(__name__)

BY_MARKER = "/by"
FROM_MARKER = "/from"
TO_MARKER = "/to"

WHITESPACE_RE = re.compile(r"\s+")
INDEX_TOKEN_RE = re.compile(r"^[+-]?[0-9]+$")

# Index of the argument that follows the command keyword.
ARGUMENT_INDEX = 1


def _split_keyword(text: str) -> Tuple[str, str]:
    """Split ``text`` on its first whitespace run into (keyword, remainder)."""
    parts = WHITESPACE_RE.split(text.strip(), maxsplit=1)
    keyword = parts[0]
    remainder = parts[1] if len(parts) > 1 else ""
    return keyword, remainder.strip()


def _split_marker(text: str, marker: str) -> Tuple[str, Optional[str]]:
    """Split ``text`` on the first ``marker``; the second part is None if absent."""
    head, found, tail = text.partition(marker)
    if not found:
        return head, None
    return head, tail


def _parse_name(segment: str) -> str:
    """Return the task name from a ``<keyword> <name>`` segment."""
    _, name = _split_keyword(segment)
    if not name:
        raise EmptyTaskError()
    return name


def _parse_timestamp(segment: str, error: Type[TaskParseError]) -> datetime:
    """Parse a ``YYYY-MM-DD HHMM`` segment, translating grammar errors to ``error``."""
    try:
        return parse_timestamp_tokens(segment.split())
    except ValueError as err:
        logger.debug("Rejected timestamp %r: %s", segment, err)
        raise error() from err


def parse_command_word(text: str) -> str:
    """Return the leading command keyword in lower case, or '' for a blank line."""
    keyword, _ = _split_keyword(text)
    return keyword.lower()


def parse_todo(text: str) -> ToDo:
    """Parse ``todo <name>``."""
    _, name = _split_keyword(text)
    if not name:
        raise EmptyTaskError()
    return ToDo(name=name, done=False)


def parse_deadline(text: str) -> Deadline:
    """Parse ``deadline <name> /by <YYYY-MM-DD> <HHMM>``.

    Raises:
        MissingTimeError: If there is no ``/by`` part or it is blank
        EmptyTaskError: If there is no name before ``/by``
        InvalidDeadlineError: If the date or time does not follow the grammar
    """
    name_segment, time_segment = _split_marker(text, BY_MARKER)
    if time_segment is None or not time_segment.strip():
        raise MissingTimeError()

    name = _parse_name(name_segment)
    due = _parse_timestamp(time_segment, InvalidDeadlineError)
    return Deadline(name=name, done=False, by=due)


def parse_event(text: str) -> Event:
    """Parse ``event <name> /from <YYYY-MM-DD> <HHMM> /to <YYYY-MM-DD> <HHMM>``.

    Raises:
        MissingTimeError: If ``/from`` or ``/to`` is missing or blank
        EmptyTaskError: If there is no name before ``/from``
        InvalidEventError: If either time is malformed or the event ends
            before it starts
    """
    name_segment, rest = _split_marker(text, FROM_MARKER)
    if rest is None or not rest.strip():
        raise MissingTimeError()

    name = _parse_name(name_segment)

    start_segment, end_segment = _split_marker(rest, TO_MARKER)
    if end_segment is None or not end_segment.strip() or not start_segment.strip():
        raise MissingTimeError()

    start = _parse_timestamp(start_segment, InvalidEventError)
    end = _parse_timestamp(end_segment, InvalidEventError)
    if start > end:
        raise InvalidEventError()

    return Event(name=name, done=False, start=start, end=end)


def parse_task_index(text: str) -> int:
    """Parse ``<command> <task number>`` and return the number as typed.

    The number is not range checked; that is up to the task list.

    Raises:
        EmptyTaskError: If no task number follows the command
        InvalidTaskError: If the task number is not a base-10 integer
    """
    tokens = text.split()
    if len(tokens) <= ARGUMENT_INDEX:
        raise EmptyTaskError()

    token = tokens[ARGUMENT_INDEX]
    if not INDEX_TOKEN_RE.match(token):
        raise InvalidTaskError(f"'{token}' is not a task number.")
    return int(token)


def parse_find_keyword(text: str) -> str:
    """Parse ``find <keyword>``.

    Only the single word after the command is used as the keyword.
    """
    tokens = text.split()
    if len(tokens) <= ARGUMENT_INDEX:
        raise InvalidTaskError("Please tell me what to find.")
    return tokens[ARGUMENT_INDEX]


def suggest_command(word: str, commands: Iterable[str]) -> Optional[str]:
    """Return the known command closest to ``word``, if any is close enough."""
    if not word:
        return None
    matches = process.extractBests(word, list(commands), scorer=fuzz.ratio,
                                   score_cutoff=70, limit=1)
    if matches:
        return matches[0][0]
    return None
