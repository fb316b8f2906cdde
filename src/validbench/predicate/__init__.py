from .errs import EmptyCompositionError, PredicateError
from .predicate import (
    Predicate,
    PredicateFn,
    all_of,
    any_of,
    is_predicate,
    predicate,
)

__all__ = [
    "EmptyCompositionError",
    "Predicate",
    "PredicateError",
    "PredicateFn",
    "all_of",
    "any_of",
    "is_predicate",
    "predicate",
]
