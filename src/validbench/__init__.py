from .model import FIXTURES, Record
from .rules import DOB_INVALID, NAME_EMPTY, NULL_MODEL, NUMBERS_EMPTY, UNSET_DATE
from .validators import VALIDATORS, get_validator
from .validators.bare import validate

__all__ = [
    "DOB_INVALID",
    "FIXTURES",
    "NAME_EMPTY",
    "NULL_MODEL",
    "NUMBERS_EMPTY",
    "UNSET_DATE",
    "VALIDATORS",
    "Record",
    "get_validator",
    "validate",
]
