from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterator, Mapping
from functools import wraps
from threading import RLock
from typing import Any, Concatenate, Generic, ParamSpec, TypeVar, cast

from validbench.predicate import Predicate, predicate
from validbench.register.errs import RuleDefConflictError, RuleDefNotNamedError
from validbench.types import RuleDef

logger = logging.getLogger(__name__)

T_contra = TypeVar("T_contra", contravariant=True)
P = ParamSpec("P")

PredicateProducer = Callable[..., Predicate[T_contra]]


class Registry(Generic[T_contra], Mapping[str, PredicateProducer[T_contra]]):
    """
    Read-only view of named predicate producers. Rules are added through ``rule_def``.
    """

    def __init__(self, name: str):
        self.name = name
        self.__predicates: dict[str, PredicateProducer[T_contra]] = {}
        self.__lock = RLock()

    def __getitem__(self, key: str) -> PredicateProducer[T_contra]:
        return self.__predicates[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__predicates)

    def __len__(self) -> int:
        return len(self.__predicates)

    def register(self, name: str, predicate_producer: PredicateProducer[T_contra]) -> None:
        """
        Register a predicate producer with a name.

        Raises:
            RuleDefConflictError: If the name is already in use.
        """
        with self.__lock:
            if name in self.__predicates:
                raise RuleDefConflictError(self.name, name, list(self.__predicates))
            self.__predicates[name] = predicate_producer
        logger.debug("Registered rule %s in %s", name, self.name)

    def rule_def(self) -> rule_def[T_contra]:
        """
        Shortcut for ``rule_def(self)``.
        """
        return rule_def(self)


class rule_def(Generic[T_contra]):  # noqa: N801
    """
    Convert the [validbench.types.RuleDef][] function to one that returns a Predicate[T], and add the rule to the
    registry. This will modify the signature of RuleDef.

    Must be used on named functions.

    Args:
        *registries: Registers to add the rule to.

    Examples:
        ```python
        from datetime import date

        dates = Registry[date]("dates")


        @rule_def(dates)
        def born_after(dob: date, year: int) -> bool:
            return dob.year > year


        millennial = born_after(2000)

        assert millennial(date(2001, 5, 1))
        assert (~millennial)(date(1999, 5, 1))
        ```

    """

    # XXX: Closure decorator functions are not directly defined due to type inference issues
    #  with IDEs and static analysis tools. Using decorator classes makes static inference more straightforward.

    def __init__(self, *registries: Registry[T_contra]):
        self.__registries = registries

    def __call__(self, fn: Callable[Concatenate[T_contra, P], bool]) -> Callable[P, Predicate[T_contra]]:
        """
        Convert the RuleDef function to one that returns a Predicate[T], and add the rule to the registry.

        Args:
            fn (RuleDef[T,P]): Rule define func. Must be a named function.

        Raises:
            RuleDefNotNamedError: If ``fn`` is a lambda or has no name.
            RuleDefConflictError: If a rule with the same fn name has already been registered.
        """
        fn = cast("RuleDef[T_contra, P]", fn)
        rule_name = getattr(fn, "__name__", None)
        if not rule_name or rule_name == "<lambda>":
            raise RuleDefNotNamedError

        doc = inspect.getdoc(fn)

        @wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Predicate[T_contra]:
            return predicate(lambda ctx: fn(ctx, *args, **kwargs), name=rule_name, desc=doc)

        sig = inspect.signature(fn)

        new_params = list(sig.parameters.values())[1:]

        wrapper.__annotations__ = {p.name: p.annotation for p in new_params}
        wrapper.__annotations__["return"] = Predicate

        wrapper.__signature__ = inspect.Signature(parameters=new_params, return_annotation=Predicate)

        for register in self.__registries:
            register.register(rule_name, wrapper)

        return wrapper


def describe(registry: Mapping[str, Any]) -> dict[str, str]:
    """
    Map each rule name of ``registry`` to its call signature, for listing in the CLI.
    """
    return {name: f"{name}{inspect.signature(producer)}" for name, producer in registry.items()}
