from collections.abc import Collection


class RegisterError(Exception):
    """Base class for exceptions in this module."""

    ...


class RuleDefNotNamedError(RegisterError):
    """Raised when rule_def is applied to a function without a usable name, such as a lambda."""

    def __init__(self):
        super().__init__("RuleDef must have a name.")


class RuleDefConflictError(RegisterError):
    """
    Raised when attempting to register a rule with a name that is already in use.
    """

    def __init__(self, registry_name: str, rule_name: str, registered: Collection[str]):
        """
        Args:
            registry_name: registry name.
            rule_name: conflict rule name.
            registered: has registered rule.

        """

        self.registry_name = registry_name
        self.rule_name = rule_name
        self.registered = registered

        super().__init__(
            f"{self.rule_name} is already registered in {self.registry_name}: {', '.join(self.registered)}",
        )
