class PredicateError(Exception):
    """Base Predicate exception."""

    ...


class EmptyCompositionError(PredicateError, ValueError):
    """
    Raised when all_of / any_of receive no predicates to combine.
    """

    def __init__(self, op: str):
        self.op = op
        super().__init__(f"{op} requires at least one predicate")
