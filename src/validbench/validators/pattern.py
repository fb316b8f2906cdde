"""Validator written as structural pattern matching over the record's fields."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from validbench.rules import DOB_INVALID, MIN_BIRTH_YEAR, NAME_EMPTY, NULL_MODEL, NUMBERS_EMPTY, resolve_current_year

if TYPE_CHECKING:
    from validbench.model import Record


def validate(record: Record | None, *, current_year: int | None = None) -> list[str]:
    if record is None:
        return [NULL_MODEL]

    errors: list[str] = []

    match record.numbers:
        case None | []:
            errors.append(NUMBERS_EMPTY)

    match record.name:
        case None | "":
            errors.append(NAME_EMPTY)

    this_year = resolve_current_year(current_year)
    match record.date_of_birth:
        case None | date(day=1, month=1, year=1):
            errors.append(DOB_INVALID)
        case date(year=year) if year <= MIN_BIRTH_YEAR or year >= this_year:
            errors.append(DOB_INVALID)

    return errors
