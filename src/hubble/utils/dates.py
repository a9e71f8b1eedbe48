"""Fixed date formats for formatting and parsing."""

from datetime import date, datetime
from enum import Enum

from hubble.models import NOTHING, Option, Some


class DateFormat(str, Enum):
    """Named date formats.

    SHORT is month/day without zero padding ("3/7"), MEDIUM is an ISO date
    ("2018-03-07") and LARGE an ISO timestamp with zeroed milliseconds
    ("2018-03-07T14:05:09.000Z").
    """

    SHORT = "short"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def pattern(self) -> str:
        """strftime/strptime pattern (SHORT is parsed with it, not formatted)."""
        return _PATTERNS[self]


_PATTERNS = {
    DateFormat.SHORT: "%m/%d",
    DateFormat.MEDIUM: "%Y-%m-%d",
    DateFormat.LARGE: "%Y-%m-%dT%H:%M:%S.000Z",
}


def format_date(value: date | datetime, fmt: DateFormat) -> str:
    """Format ``value`` with ``fmt``.

    A plain ``date`` formatted as LARGE gets a midnight time component.
    """
    if fmt is DateFormat.SHORT:
        return f"{value.month}/{value.day}"
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    return value.strftime(fmt.pattern)


def parse_date(text: str, fmt: DateFormat) -> Option[datetime]:
    """Parse ``text`` with ``fmt``; NOTHING if it does not match.

    SHORT has no year, so the result is in 1900 (the strptime default).
    """
    try:
        return Some(datetime.strptime(text, fmt.pattern))
    except ValueError:
        return NOTHING
