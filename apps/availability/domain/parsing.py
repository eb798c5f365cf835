"""Parsing of calendar values supplied by the UI (``yyyy-MM-dd`` and ``HH:MM``)."""

import re
from datetime import date, datetime, time

from shared.domain.exceptions import ValidationError

# strptime alone would also take "9:5"
TIME_PATTERN = re.compile(r'\d{2}:\d{2}(:\d{2})?', re.ASCII)


def parse_calendar_date(value) -> date:
    """Accept a ``date`` or an ISO ``yyyy-MM-dd`` string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid date '{value}', expected yyyy-MM-dd")


def parse_time_of_day(value) -> time:
    """Accept a ``time`` or a zero-padded 24-hour ``HH:MM`` / ``HH:MM:SS`` string."""
    if isinstance(value, time):
        return value.replace(microsecond=0)
    text = str(value).strip()
    if TIME_PATTERN.fullmatch(text):
        fmt = '%H:%M:%S' if text.count(':') == 2 else '%H:%M'
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            pass
    raise ValidationError(f"Invalid time '{value}', expected HH:MM")
