"""
Attribute-driven validator.

The constraints live on a pydantic model as field validators. The record is read through
``from_attributes`` and every violated field turns into one failure message.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from validbench.rules import (
    DOB_INVALID,
    NAME_EMPTY,
    NULL_MODEL,
    NUMBERS_EMPTY,
    UNSET_DATE,
    is_plausible_dob,
    resolve_current_year,
)

if TYPE_CHECKING:
    from validbench.model import Record

CURRENT_YEAR_CTX = "current_year"

RULE_ERRORS: Final = frozenset({"numbers_empty", "name_empty", "dob_invalid"})


class RecordSchema(BaseModel):
    """
    Field order is failure order.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True, validate_default=True, extra="ignore")

    numbers: list[int] | None = None
    name: str | None = None
    date_of_birth: date | None = UNSET_DATE
    count: int = 0

    @field_validator("numbers")
    @classmethod
    def numbers_present(cls, v: list[int] | None) -> list[int] | None:
        if not v:
            raise PydanticCustomError("numbers_empty", NUMBERS_EMPTY)
        return v

    @field_validator("name")
    @classmethod
    def name_present(cls, v: str | None) -> str | None:
        if not v:
            raise PydanticCustomError("name_empty", NAME_EMPTY)
        return v

    # Plain mode: the rule judges the raw value, so datetimes are not coerced or rejected as inexact dates.
    @field_validator("date_of_birth", mode="plain")
    @classmethod
    def dob_plausible(cls, v: date | None, info: ValidationInfo) -> date | None:
        if v is not None and not isinstance(v, date):
            raise PydanticCustomError("date_type", "Input should be a valid date")
        current_year = (info.context or {}).get(CURRENT_YEAR_CTX)
        if not is_plausible_dob(v, resolve_current_year(current_year)):
            raise PydanticCustomError("dob_invalid", DOB_INVALID)
        return v


def validate(record: Record | None, *, current_year: int | None = None) -> list[str]:
    """
    Raises:
        ValidationError: If a field has the wrong type, which is a caller error rather than a rule failure.
    """
    if record is None:
        return [NULL_MODEL]

    try:
        RecordSchema.model_validate(
            record,
            from_attributes=True,
            context={CURRENT_YEAR_CTX: resolve_current_year(current_year)},
        )
    except ValidationError as e:
        failures = []
        for error in e.errors():
            if error["type"] not in RULE_ERRORS:
                raise
            failures.append(error["msg"])
        return failures
    return []
