from __future__ import annotations

from datetime import date, datetime

import pytest

from validbench.config import Settings, get_settings
from validbench.rules import UNSET_DATE, is_plausible_dob, is_sentinel_date, resolve_current_year


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, True),
        (UNSET_DATE, True),
        (datetime(1, 1, 1, 12, 30), True),  # noqa: DTZ001
        (date(1, 1, 2), False),
        (date(2001, 1, 1), False),
        (date(1, 2, 1), False),
    ],
)
def test_is_sentinel_date(value, expected):
    assert is_sentinel_date(value) is expected


def test_is_plausible_dob_bounds():
    assert not is_plausible_dob(date(2000, 12, 31), 2030)
    assert is_plausible_dob(date(2001, 1, 1), 2030)
    assert is_plausible_dob(date(2029, 12, 31), 2030)
    assert not is_plausible_dob(date(2030, 1, 1), 2030)
    assert not is_plausible_dob(None, 2030)


def test_resolve_current_year_prefers_argument(monkeypatch):
    monkeypatch.setenv("VALIDBENCH_CURRENT_YEAR", "2040")
    get_settings.cache_clear()
    assert resolve_current_year(2025) == 2025
    assert resolve_current_year() == 2040


def test_resolve_current_year_falls_back_to_today():
    assert resolve_current_year() == date.today().year  # noqa: DTZ011


def test_settings_defaults():
    settings = Settings()
    assert settings.current_year is None
    assert settings.default_validator == "bare"
    assert settings.log_level == "WARNING"


def test_settings_reject_out_of_range_year(monkeypatch):
    monkeypatch.setenv("VALIDBENCH_CURRENT_YEAR", "0")
    with pytest.raises(ValueError, match="current_year"):
        Settings()
