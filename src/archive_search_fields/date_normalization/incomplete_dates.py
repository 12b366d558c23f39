"""Date helpers used while indexing descriptions."""

from __future__ import annotations

import calendar
import re
from datetime import UTC, date, datetime

SEARCH_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_LEADING_DIGITS = re.compile(r"\s*(\d+)")


class InvalidDateFormat(ValueError):
    """Raised when a date string cannot be interpreted."""

    def __init__(self, value: str, message: str | None = None) -> None:
        super().__init__(
            message or f"Invalid date string given: {value}. Must be in format YYYY-MM-DD"
        )
        self.value = value


def normalize_incomplete_date(value: str | None, end_of_range: bool = False) -> str | None:
    """Fill unknown month or day components of a ``YYYY-MM-DD`` string.

    Dates stored with only the year (``2014-00-00``) become the first day of
    that year, or the last one when `end_of_range` is set. Year ``0000`` has no
    calendar and yields None.
    """
    if not value:
        return None

    parts = value.split("-")
    if len(parts) != 3:
        raise InvalidDateFormat(value)

    year, month, day = parts
    year_number, month_number, day_number = (_leading_int(part) for part in parts)

    if year_number == 0:
        return None

    if month_number == 0:
        month = "12" if end_of_range else "01"
        month_number = int(month)

    if day_number == 0:
        if end_of_range:
            try:
                day = str(calendar.monthrange(year_number, month_number)[1])
            except calendar.IllegalMonthError as exc:
                raise InvalidDateFormat(value) from exc
        else:
            day = "01"

    return "-".join((year, month, day))


def _leading_int(component: str) -> int:
    # Components such as "00 00:00:00" or "xx" read as their leading digits, or 0.
    match = _LEADING_DIGITS.match(component)
    return int(match.group(1)) if match else 0


def convert_date(value: date | datetime | str | int | float | None) -> str | None:
    """Render a date in the search engine's ``YYYY-MM-DDTHH:MM:SSZ`` format.

    Aware datetimes are converted to UTC, numbers are read as Unix timestamps
    and strings must be ISO 8601.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidDateFormat(str(value), f"Invalid date value given: {value!r}")
    if isinstance(value, int | float):
        moment = datetime.fromtimestamp(value, tz=UTC)
    elif isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    else:
        try:
            moment = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise InvalidDateFormat(value, f"Invalid date string given: {value}") from exc

    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC)
    return moment.strftime(SEARCH_DATE_FORMAT)
