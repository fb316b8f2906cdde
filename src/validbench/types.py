from __future__ import annotations

from typing import TYPE_CHECKING, Literal, Protocol

if TYPE_CHECKING:
    from validbench.model import Record

type LogicBinOp = Literal["and", "or"]
type PredicateNodeType = Literal["leaf", "and", "or", "not"]


class RuleDef[RunCtx, **RuleParams](Protocol):
    """
    A callable that takes a context and positional and keyword arguments and returns a boolean.
    """

    __name__: str

    def __call__(self, ctx: RunCtx, /, *args: RuleParams.args, **kwargs: RuleParams.kwargs) -> bool:
        """
        Take a context and positional and keyword arguments and returns a boolean.

        Args:
            ctx: Rule context, usually a single field value of the record.
            *args: Positional arguments for pass to the rule.
            **kwargs: Keyword arguments for pass to the rule.

        Examples:
            >>> def is_born_after(dob, year: int) -> bool:
            ...     return dob.year > year
            >>> is_born_after.__name__
            'is_born_after'

        """

        ...


class Validator(Protocol):
    """
    One validation style. Returns the ordered failure messages for a record, empty when it passes.
    """

    def __call__(self, record: Record | None, /, *, current_year: int | None = None) -> list[str]: ...
