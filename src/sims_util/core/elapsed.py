"""Human-readable elapsed time intervals.

Converts a number of milliseconds into ``H:MM:SS.mmm``. Hours are not
wrapped at a day boundary, so 90000000 ms formats as ``25:00:00.000``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidValueError

# Millisecond values for constituent time units
PER_SECOND = 1000
PER_MINUTE = PER_SECOND * 60
PER_HOUR = PER_MINUTE * 60
PER_DAY = PER_HOUR * 24


@dataclass(frozen=True)
class ElapsedTime:
    """An elapsed interval split into its constituent units."""

    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    @classmethod
    def from_millis(cls, millis: int) -> ElapsedTime:
        if millis < 0:
            raise InvalidValueError(f"Elapsed time cannot be negative: {millis}")

        hours, remainder = divmod(millis, PER_HOUR)
        minutes, remainder = divmod(remainder, PER_MINUTE)
        seconds, remainder = divmod(remainder, PER_SECOND)
        return cls(hours, minutes, seconds, remainder)

    def __str__(self) -> str:
        return "%d:%02d:%02d.%03d" % (
            self.hours, self.minutes, self.seconds, self.milliseconds,
        )


def format_elapsed(millis: int) -> str:
    """Format an interval in milliseconds as ``H:MM:SS.mmm``."""
    return str(ElapsedTime.from_millis(millis))
