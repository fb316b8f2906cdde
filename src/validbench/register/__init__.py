from .errs import RegisterError, RuleDefConflictError, RuleDefNotNamedError
from .registry import Registry, rule_def

__all__ = [
    "RegisterError",
    "Registry",
    "RuleDefConflictError",
    "RuleDefNotNamedError",
    "rule_def",
]
