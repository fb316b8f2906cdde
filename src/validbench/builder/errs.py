class RuleBuilderError(Exception):
    """Base RuleBuilder exception."""

    ...


class RuleMessageMissingError(RuleBuilderError):
    """
    Raised when a rule reaches validation without a failure message.
    """

    def __init__(self, rule_name: str):
        self.rule_name = rule_name
        super().__init__(f"Rule '{rule_name}' has no message, call with_message() before validating.")


class RuleWithoutChecksError(RuleBuilderError):
    """
    Raised when a rule reaches validation without any check attached.
    """

    def __init__(self, rule_name: str):
        self.rule_name = rule_name
        super().__init__(f"Rule '{rule_name}' has no checks.")


class RuleSetSealedError(RuleBuilderError):
    """
    Raised when rules are added to a rule set that has already validated something.
    """

    def __init__(self):
        super().__init__("Rule set is sealed after its first validation.")
