"""Minimal imperative validator: plain conditionals and nothing else."""

from __future__ import annotations

from typing import TYPE_CHECKING

from validbench.rules import (
    DOB_INVALID,
    MIN_BIRTH_YEAR,
    NAME_EMPTY,
    NULL_MODEL,
    NUMBERS_EMPTY,
    UNSET_DATE,
    resolve_current_year,
)

if TYPE_CHECKING:
    from validbench.model import Record


def validate(record: Record | None, *, current_year: int | None = None) -> list[str]:
    errors: list[str] = []

    if record is None:
        errors.append(NULL_MODEL)
        return errors

    if record.numbers is None or len(record.numbers) == 0:
        errors.append(NUMBERS_EMPTY)

    if record.name is None or len(record.name) == 0:
        errors.append(NAME_EMPTY)

    dob = record.date_of_birth
    this_year = resolve_current_year(current_year)
    if (
        dob is None
        or dob == UNSET_DATE
        or (dob.day == 1 and dob.month == 1 and dob.year == 1)
        or dob.year <= MIN_BIRTH_YEAR
        or dob.year >= this_year
    ):
        errors.append(DOB_INVALID)

    return errors
