"""Date and time grammar for task commands and stored records.

Dates are ISO calendar dates (``YYYY-MM-DD``) and times are four-digit
24-hour clock values (``HHMM``). Both are combined into a naive
``datetime``; the tracker never deals with time zones.
"""

import re
from datetime import date, datetime, time
from typing import Sequence

DATE_TOKEN_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
TIME_TOKEN_RE = re.compile(r"^[0-9]{4}$")

# A timestamp is written as two whitespace separated tokens: date then time.
TIMESTAMP_TOKEN_COUNT = 2
DATE_TOKEN_INDEX = 0
TIME_TOKEN_INDEX = 1

DEFAULT_DISPLAY_FORMAT = "%b %d %Y %H:%M"


def parse_date_token(token: str) -> date:
    """Parse a ``YYYY-MM-DD`` token.

    Args:
        token: Date token taken from user input or a stored record

    Returns:
        The calendar date

    Raises:
        ValueError: If the token is not in the grammar or is not a real date
    """
    if not DATE_TOKEN_RE.match(token):
        raise ValueError(f"Date must be written as YYYY-MM-DD, got {token!r}")
    return date.fromisoformat(token)


def parse_time_token(token: str) -> time:
    """Parse a ``HHMM`` token as two fixed two-character fields.

    Args:
        token: Time token taken from user input or a stored record

    Returns:
        The time of day

    Raises:
        ValueError: If the token is not four digits or is out of range
    """
    if not TIME_TOKEN_RE.match(token):
        raise ValueError(f"Time must be written as HHMM, got {token!r}")
    hour = int(token[:2])
    minute = int(token[2:])
    return time(hour, minute)


def combine(day: date, hour: int, minute: int) -> datetime:
    """Combine a date with an hour and minute into a naive datetime."""
    return datetime.combine(day, time(hour, minute))


def parse_timestamp_tokens(tokens: Sequence[str]) -> datetime:
    """Parse a ``[date, time]`` token pair into a datetime.

    Raises:
        ValueError: If the token count is wrong or either token is invalid
    """
    if len(tokens) != TIMESTAMP_TOKEN_COUNT:
        raise ValueError(
            f"Expected {TIMESTAMP_TOKEN_COUNT} tokens (date and time), got {len(tokens)}"
        )
    day = parse_date_token(tokens[DATE_TOKEN_INDEX])
    moment = parse_time_token(tokens[TIME_TOKEN_INDEX])
    return combine(day, moment.hour, moment.minute)


def parse_timestamp(text: str) -> datetime:
    """Parse ``YYYY-MM-DD HHMM`` text into a datetime."""
    return parse_timestamp_tokens(text.split())


def format_store_timestamp(dt: datetime) -> str:
    """Render a datetime in the same grammar the parser accepts."""
    # strftime does not zero-pad years below 1000 on every platform
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} {dt.hour:02d}{dt.minute:02d}"


def format_display_timestamp(dt: datetime, fmt: str = DEFAULT_DISPLAY_FORMAT) -> str:
    """Render a datetime for people to read."""
    return dt.strftime(fmt)


def max_datetime() -> datetime:
    """Return datetime.max for sorting undated tasks last.

    Returns:
        The largest representable naive datetime
    """
    return datetime.max
