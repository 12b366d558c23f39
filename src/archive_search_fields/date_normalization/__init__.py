"""Date normalization exports."""

from .incomplete_dates import (
    SEARCH_DATE_FORMAT,
    InvalidDateFormat,
    convert_date,
    normalize_incomplete_date,
)

__all__ = [
    "SEARCH_DATE_FORMAT",
    "InvalidDateFormat",
    "convert_date",
    "normalize_incomplete_date",
]
