"""Validator declared with the rule builder, one chained rule per field."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from validbench.builder import RuleSet
from validbench.register.value_rules import value_rules
from validbench.rules import DOB_INVALID, MIN_BIRTH_YEAR, NAME_EMPTY, NUMBERS_EMPTY, resolve_current_year

if TYPE_CHECKING:
    from validbench.model import Record


class RecordRules(RuleSet["Record"]):
    """
    Rules for a Record, bound to the year used as the upper date-of-birth bound.
    """

    def __init__(self, current_year: int):
        super().__init__()
        self.current_year = current_year

        self.rule_for(lambda r: r.numbers, name="numbers").not_null().not_empty().with_message(NUMBERS_EMPTY)

        self.rule_for(lambda r: r.name, name="name").not_null().not_empty().with_message(NAME_EMPTY)

        (
            self.rule_for(lambda r: r.date_of_birth, name="date_of_birth")
            .not_null()
            .must(value_rules["not_sentinel_date"]())
            .must(value_rules["year_between"](MIN_BIRTH_YEAR, current_year))
            .with_message(DOB_INVALID)
        )


@lru_cache(maxsize=8)
def rules_for_year(current_year: int) -> RecordRules:
    """
    Shared, already sealed RecordRules for ``current_year``.
    """
    rules = RecordRules(current_year)
    _ = rules.rules
    return rules


def validate(record: Record | None, *, current_year: int | None = None) -> list[str]:
    return rules_for_year(resolve_current_year(current_year)).validate(record)
