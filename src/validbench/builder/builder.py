from __future__ import annotations

import logging
from collections.abc import Callable
from threading import RLock
from typing import Any, Generic, NamedTuple, Self, TypeVar

from validbench.builder.errs import RuleMessageMissingError, RuleSetSealedError, RuleWithoutChecksError
from validbench.predicate import Predicate, all_of, is_predicate, predicate
from validbench.register.value_rules import value_rules
from validbench.rules import NULL_MODEL

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")


class Rule(NamedTuple, Generic[T]):
    """
    A sealed rule: the selected value must satisfy ``check``, otherwise ``message`` is reported.
    """

    name: str
    selector: Callable[[T], Any]
    check: Predicate[Any]
    message: str


class RuleBuilder(Generic[T, V]):
    """
    Chains checks over one selected value of the validated object.

    Checks run left to right and stop at the first failing one. The rule reports its message once,
    whichever check failed.
    """

    def __init__(self, selector: Callable[[T], V], *, name: str):
        self.name = name
        self.selector = selector
        self.message: str | None = None
        self._checks: list[Predicate[V]] = []

    def not_null(self) -> Self:
        """The value must not be ``None``."""
        self._checks.append(value_rules["not_null"]())
        return self

    def not_empty(self) -> Self:
        """The value must not be ``None`` and must have a non-zero length."""
        self._checks.append(value_rules["not_empty"]())
        return self

    def must(self, check: Predicate[V] | Callable[[V], bool]) -> Self:
        """The value must satisfy ``check``, a predicate or any ``value -> bool`` callable."""
        self._checks.append(check if is_predicate(check) else predicate(check))
        return self

    def with_message(self, message: str) -> Self:
        """Message reported when any check of this rule fails."""
        self.message = message
        return self

    def build(self) -> Rule[T]:
        """
        Seal the chain into a Rule.

        Raises:
            RuleWithoutChecksError: If no check was attached.
            RuleMessageMissingError: If no message was set.
        """
        if not self._checks:
            raise RuleWithoutChecksError(self.name)
        if self.message is None:
            raise RuleMessageMissingError(self.name)
        return Rule(self.name, self.selector, all_of(self._checks), self.message)


class RuleSet(Generic[T]):
    """
    Declarative validator. Subclasses declare their rules in ``__init__`` through ``rule_for``.

    Examples:
        ```python
        class NameRules(RuleSet[Record]):
            def __init__(self):
                super().__init__()
                self.rule_for(lambda r: r.name).not_empty().with_message("Name is empty.")


        assert NameRules().validate(Record(name="")) == ["Name is empty."]
        ```

    """

    null_message: str = NULL_MODEL

    def __init__(self):
        self._builders: list[RuleBuilder[T, Any]] = []
        self._rules: tuple[Rule[T], ...] | None = None
        self._lock = RLock()

    def rule_for(self, selector: Callable[[T], V], *, name: str | None = None) -> RuleBuilder[T, V]:
        """
        Start a rule over the value picked by ``selector``.

        Raises:
            RuleSetSealedError: If this rule set has already validated an object.
        """
        if self._rules is not None:
            raise RuleSetSealedError
        builder = RuleBuilder(selector, name=name or f"rule_{len(self._builders)}")
        self._builders.append(builder)
        return builder

    @property
    def rules(self) -> tuple[Rule[T], ...]:
        """
        The sealed rules, built on first access.
        """
        if self._rules is None:
            with self._lock:
                if self._rules is None:
                    self._rules = tuple(builder.build() for builder in self._builders)
                    logger.debug("Sealed %s with %d rules", type(self).__name__, len(self._rules))
        return self._rules

    def validate(self, obj: T | None) -> list[str]:
        """
        Return the messages of every failing rule, in declaration order.

        A missing object reports ``null_message`` alone.
        """
        if obj is None:
            return [self.null_message]
        return [message for _, selector, check, message in self.rules if not check(selector(obj))]
