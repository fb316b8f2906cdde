from .builder import RuleBuilder, RuleSet
from .errs import RuleBuilderError, RuleMessageMissingError, RuleSetSealedError, RuleWithoutChecksError

__all__ = [
    "RuleBuilder",
    "RuleBuilderError",
    "RuleMessageMissingError",
    "RuleSet",
    "RuleSetSealedError",
    "RuleWithoutChecksError",
]
