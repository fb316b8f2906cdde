from collections.abc import Collection


class ValidBenchError(Exception):
    """Base validbench exception."""

    ...


class UnknownValidatorError(ValidBenchError):
    """Raised when a validator style is looked up by a name that does not exist."""

    def __init__(self, name: str, available: Collection[str]):
        self.name = name
        self.available = available
        super().__init__(f"Unknown validator '{self.name}', expected one of: {', '.join(self.available)}")
