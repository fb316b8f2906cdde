from __future__ import annotations

import inspect
from datetime import date
from typing import get_type_hints

import pytest

from validbench.predicate import Predicate
from validbench.register import Registry, RuleDefConflictError, RuleDefNotNamedError, rule_def
from validbench.register.registry import describe
from validbench.register.value_rules import value_rules


@pytest.fixture
def register():
    return Registry[date]("test_register")


def test_rule_registration_and_lookup(register: Registry[date]):
    @rule_def(register)
    def born_after(dob: date, year: int) -> bool:
        return dob.year > year

    assert "born_after" in register
    assert register["born_after"] is born_after
    assert len(register) == 1
    assert list(register) == ["born_after"]

    predicate = born_after(2000)
    assert isinstance(predicate, Predicate)
    assert predicate.name == "born_after"
    assert predicate(date(2001, 1, 1))
    assert not predicate(date(2000, 12, 31))


def test_registry_rule_def_method(register: Registry[date]):
    @register.rule_def()
    def is_leap_day(dob: date) -> bool:
        """Born on February 29th."""
        return (dob.month, dob.day) == (2, 29)

    produced = register["is_leap_day"]()
    assert produced.desc == "Born on February 29th."
    assert produced(date(2004, 2, 29))
    assert not produced(date(2004, 3, 1))


def test_rule_def_signature(register: Registry[date]):
    @rule_def(register)
    def born_between(dob: date, low: int, high: int, *, inclusive: bool = False) -> bool:
        if inclusive:
            return low <= dob.year <= high
        return low < dob.year < high

    sig = inspect.signature(born_between)
    assert list(sig.parameters) == ["low", "high", "inclusive"]
    assert sig.parameters["low"].annotation == "int"
    assert sig.parameters["inclusive"].default is False
    assert sig.return_annotation is Predicate

    type_hints = get_type_hints(born_between)
    assert type_hints["low"] is int
    assert type_hints["inclusive"] is bool
    assert type_hints["return"] is Predicate

    assert born_between(2000, 2010, inclusive=True)(date(2000, 5, 5))
    assert not born_between(2000, 2010)(date(2000, 5, 5))


def test_rule_registered_in_several_registries():
    first = Registry[date]("first")
    second = Registry[date]("second")

    @rule_def(first, second)
    def any_date(_dob: date) -> bool:
        return True

    assert first["any_date"] is second["any_date"] is any_date


def test_duplicate_rule_name_conflicts(register: Registry[date]):
    @register.rule_def()
    def twice(_dob: date) -> bool:
        return True

    with pytest.raises(RuleDefConflictError) as exc_info:

        @register.rule_def()
        def twice(_dob: date) -> bool:  # noqa: F811
            return False

    assert exc_info.value.rule_name == "twice"
    assert exc_info.value.registry_name == "test_register"


def test_lambda_rule_is_rejected(register):
    with pytest.raises(RuleDefNotNamedError):
        rule_def(register)(lambda dob: True)


def test_value_rules():
    assert set(value_rules) == {"not_null", "not_empty", "not_sentinel_date", "year_between"}

    assert value_rules["not_null"]()(0)
    assert not value_rules["not_null"]()(None)
    assert value_rules["not_empty"]()("x")
    assert not value_rules["not_empty"]()("")
    assert not value_rules["not_empty"]()(None)
    assert value_rules["not_sentinel_date"]()(date(2001, 1, 1))
    assert not value_rules["not_sentinel_date"]()(date.min)
    assert value_rules["year_between"](2000, 2030)(date(2001, 1, 1))
    assert not value_rules["year_between"](2000, 2030)(date(2030, 1, 1))


def test_describe_lists_signatures():
    described = describe(value_rules)
    assert set(described) == set(value_rules)
    assert described["year_between"].startswith("year_between(low")
    assert "high" in described["year_between"]


def test_registry_is_read_only_mapping(register):
    with pytest.raises(TypeError):
        register["anything"] = lambda: None
