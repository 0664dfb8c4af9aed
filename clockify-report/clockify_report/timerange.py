"""Parsing of the report time range and date tokens."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# Tried in order; hour and minute first, then the bare hour.
TIME_FORMATS = ('%H:%M', '%H.%M')
HOUR_FORMATS = ('%H',)

# Day and month only (year taken from today), then the full date with a
# four or two digit year.
DAY_MONTH_FORMATS = ('%d.%m', '%d/%m')
DAY_MONTH_YEAR_FORMATS = ('%d.%m.%Y', '%d/%m/%Y', '%d.%m.%y', '%d/%m/%y')


@dataclass(frozen=True)
class TimeRange:
    """Start and end of a report on the same calendar day."""

    start: datetime
    end: datetime

    @property
    def day(self) -> date:
        return self.start.date()

    def __str__(self) -> str:
        return f"<Range from {self.start} to {self.end}>"


@dataclass(frozen=True)
class ReportInput:
    time_range: TimeRange
    message: str


def _strptime(value: str, formats: Iterable[str]) -> Optional[datetime]:
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_time(token: str) -> Optional[Tuple[int, int]]:
    """
    Parse a clock time token such as ``9``, ``09:30`` or ``18.40``.

    Parameters
    ----------
    token : str
        Hour with optional minutes, 24h clock

    Returns
    -------
    Optional[Tuple[int, int]]
        Hour and minute, or None if the token is not a clock time
    """
    parsed = _strptime(token, TIME_FORMATS)
    if parsed is not None:
        return parsed.hour, parsed.minute

    parsed = _strptime(token, HOUR_FORMATS)
    if parsed is not None:
        return parsed.hour, 0

    return None


def _parse_date(token: str, today: date) -> Optional[date]:
    # The year is appended before parsing so that 29.02 is judged
    # against the current year and not strptime's default of 1900.
    parsed = _strptime(f"{token} {today.year}", (f"{fmt} %Y" for fmt in DAY_MONTH_FORMATS))
    if parsed is not None:
        return parsed.date()

    parsed = _strptime(token, DAY_MONTH_YEAR_FORMATS)
    if parsed is not None:
        return parsed.date()

    return None


def parse_date(token: str, today: Optional[date] = None) -> date:
    """
    Parse a report date token, falling back to today.

    A token that is not a date is not an error: the caller treats it as
    regular text instead.

    Parameters
    ----------
    token : str
        Day and month (``03.06``) or day, month and year (``03.06.2024``, ``03.06.24``)
    today : Optional[date]
        Reference date, defaults to the current date

    Returns
    -------
    date
        The parsed date, or ``today`` if the token is not a date
    """
    today = today or date.today()
    return _parse_date(token, today) or today


def is_date(token: str, today: Optional[date] = None) -> bool:
    return _parse_date(token, today or date.today()) is not None


def parse_time_range(arguments: Sequence[str], today: Optional[date] = None) -> Optional[TimeRange]:
    """
    Build the time range of a report command.

    ``arguments[0]`` is the command token, ``arguments[1]`` the
    ``<from>-<to>`` time token and ``arguments[2]`` an optional date.
    An end before the start is returned as is.

    Parameters
    ----------
    arguments : Sequence[str]
        Report command tokens, command token included
    today : Optional[date]
        Reference date, defaults to the current date

    Returns
    -------
    Optional[TimeRange]
        The time range, or None if the tokens do not describe one
    """
    if len(arguments) < 3:
        logger.debug("Too few report arguments: %s", list(arguments))
        return None

    parts = arguments[1].split('-')
    if len(parts) != 2 or not all(parts):
        logger.debug("Time token %r is not a <from>-<to> range", arguments[1])
        return None

    time_from = parse_time(parts[0])
    time_to = parse_time(parts[1])
    if time_from is None or time_to is None:
        logger.debug("Could not parse clock times from %r", arguments[1])
        return None

    day = parse_date(arguments[2], today)
    start = datetime.combine(day, time(*time_from))
    end = datetime.combine(day, time(*time_to))
    if end < start:
        logger.debug("Time range ends before it starts: %s - %s", start, end)

    return TimeRange(start=start, end=end)


def parse_report_input(arguments: Sequence[str], today: Optional[date] = None) -> Optional[ReportInput]:
    """
    Parse the positional part of a report command.

    The message is made of all tokens after the date, or after the time
    token when the third token is not a date.
    """
    time_range = parse_time_range(arguments, today)
    if time_range is None:
        return None

    first_word = 3 if is_date(arguments[2], today) else 2
    words: List[str] = list(arguments[first_word:])
    message = ' '.join(words).strip()
    if not message:
        logger.debug("Report message is missing")
        return None

    return ReportInput(time_range=time_range, message=message)
