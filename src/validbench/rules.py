"""
The validation rule contract shared by every validator style.

A record passes when ``numbers`` is non-empty, ``name`` is non-empty and ``date_of_birth`` is a plausible
date: not a sentinel, born strictly after ``MIN_BIRTH_YEAR`` and strictly before the current year.
"""

from __future__ import annotations

from datetime import date

from validbench.config import get_settings

NULL_MODEL = "Null model."
NUMBERS_EMPTY = "Numbers are empty."
NAME_EMPTY = "Name is empty."
DOB_INVALID = "Dob is invalid."

MIN_BIRTH_YEAR = 2000

# The "zero" date. Records constructed without a date of birth carry this value.
UNSET_DATE = date.min


def is_sentinel_date(value: date | None) -> bool:
    """
    Whether ``value`` means "not actually set".

    Catches ``None``, ``UNSET_DATE`` and any value that is exactly day=1 AND month=1 AND year=1,
    which also covers datetimes on that day.
    """
    if value is None or value == UNSET_DATE:
        return True
    return value.day == 1 and value.month == 1 and value.year == 1


def is_plausible_dob(value: date | None, current_year: int) -> bool:
    """
    Whether ``value`` is a real date of birth strictly between ``MIN_BIRTH_YEAR`` and ``current_year``.
    """
    if is_sentinel_date(value):
        return False
    return MIN_BIRTH_YEAR < value.year < current_year


def resolve_current_year(current_year: int | None = None) -> int:
    """
    Resolve the year used by the upper date-of-birth bound.

    An explicit argument wins, then the configured ``VALIDBENCH_CURRENT_YEAR``, then today's calendar year.
    """
    if current_year is not None:
        return current_year
    configured = get_settings().current_year
    if configured is not None:
        return configured
    return date.today().year  # noqa: DTZ011
