"""
Common Value Objects

- TimeRange: a half-open [start, end) interval of time-of-day on one date
"""

from dataclasses import dataclass
from datetime import date, time

from shared.domain.base import ValueObject
from shared.domain.exceptions import ValidationError


@dataclass(frozen=True)
class TimeRange(ValueObject):
    """
    Time range value object

    Represents one bookable interval on a calendar date. The end time is
    exclusive, so back-to-back ranges (09:00-10:00, 10:00-11:00) do not overlap.
    """
    date: date
    start_time: time
    end_time: time

    def __post_init__(self):
        if self.start_time >= self.end_time:
            raise ValidationError(
                f"Start time ({self.start_time:%H:%M}) must be before "
                f"end time ({self.end_time:%H:%M})"
            )

    def overlaps_with(self, other: 'TimeRange') -> bool:
        """
        Check if this range overlaps with another

        Examples:
            - 09:00-10:00 overlaps with 09:30-10:30 -> True
            - 09:00-10:00 overlaps with 10:00-11:00 -> False (adjacent)
            - ranges on different dates never overlap
        """
        if not isinstance(other, TimeRange):
            raise TypeError("Can only check overlap with another TimeRange")

        if self.date != other.date:
            return False
        return self.start_time < other.end_time and self.end_time > other.start_time

    def __str__(self):
        return f"{self.date.isoformat()} {self.start_time:%H:%M}-{self.end_time:%H:%M}"

    def __repr__(self):
        return f"TimeRange({self.date}, {self.start_time}, {self.end_time})"
