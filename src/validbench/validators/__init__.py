from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from validbench.errs import UnknownValidatorError

from . import attribute, bare, fluent, pattern

if TYPE_CHECKING:
    from validbench.types import Validator

VALIDATORS: Mapping[str, Validator] = MappingProxyType(
    {
        "pattern": pattern.validate,
        "builder": fluent.validate,
        "attribute": attribute.validate,
        "bare": bare.validate,
    },
)


def get_validator(name: str) -> Validator:
    """
    Look up a validator style by name.

    Raises:
        UnknownValidatorError: If no style has that name.
    """
    try:
        return VALIDATORS[name]
    except KeyError:
        raise UnknownValidatorError(name, list(VALIDATORS)) from None


__all__ = ["VALIDATORS", "get_validator"]
