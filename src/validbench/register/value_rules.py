"""
Field-level rules used by the rule builder. Each rule receives the selected field value, never the record.
"""

from __future__ import annotations

from collections.abc import Sized
from datetime import date
from typing import Any

from validbench.register.registry import Registry
from validbench.rules import is_sentinel_date

value_rules = Registry[Any]("value_rules")


@value_rules.rule_def()
def not_null(value: Any) -> bool:  # noqa: ANN401
    """Value is present."""
    return value is not None


@value_rules.rule_def()
def not_empty(value: Sized | None) -> bool:
    """Value is present and has at least one item or character."""
    return value is not None and len(value) > 0


@value_rules.rule_def()
def not_sentinel_date(value: date | None) -> bool:
    """Date is a real value rather than a "not set" placeholder."""
    return not is_sentinel_date(value)


@value_rules.rule_def()
def year_between(value: date, low: int, high: int) -> bool:
    """Year of the date lies strictly between ``low`` and ``high``."""
    return low < value.year < high
