"""
Shared fixtures for validator tests.
"""

from __future__ import annotations

from datetime import date

import pytest
from polyfactory.factories import DataclassFactory
from polyfactory.fields import Use

from validbench.config import get_settings
from validbench.model import Record
from validbench.types import Validator
from validbench.validators import VALIDATORS

# Injected everywhere so outcomes do not depend on the wall clock.
CURRENT_YEAR = 2030


class ValidRecordFactory(DataclassFactory[Record]):
    """Records that pass every rule for CURRENT_YEAR."""

    __model__ = Record

    count = Use(DataclassFactory.__random__.randint, -100, 100)
    numbers = Use(DataclassFactory.__random__.sample, range(1000), 3)
    name = Use(DataclassFactory.__faker__.first_name)
    date_of_birth = Use(
        DataclassFactory.__faker__.date_between_dates,
        date(2001, 1, 1),
        date(CURRENT_YEAR - 1, 12, 31),
    )


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from VALIDBENCH_* variables of the surrounding environment."""
    for key in ("VALIDBENCH_CURRENT_YEAR", "VALIDBENCH_DEFAULT_VALIDATOR", "VALIDBENCH_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(params=list(VALIDATORS), ids=list(VALIDATORS))
def validate(request: pytest.FixtureRequest) -> Validator:
    """Each validator style in turn."""
    return VALIDATORS[request.param]


@pytest.fixture
def valid_record() -> Record:
    return Record(numbers=[1, 2, 3], name="Alice", date_of_birth=date(2010, 6, 15), count=3)
