from __future__ import annotations

import ast
import logging
from abc import ABC
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Literal,
    NamedTuple,
    TypeAlias,
    TypeGuard,
    TypeVar,
    assert_never,
    final,
)

from validbench.predicate.errs import EmptyCompositionError

if TYPE_CHECKING:
    from validbench.types import LogicBinOp, PredicateNodeType

logger = logging.getLogger(__name__)

T_contra = TypeVar("T_contra", contravariant=True)

PredicateFn = Callable[[T_contra], bool]

COMPILED_PREDICATE = "_compiled_predicate"


@dataclass(frozen=True, kw_only=True)
class Predicate(Generic[T_contra], ABC):
    """
    Base class for predicate nodes in the predicate tree.
    """

    node_type: PredicateNodeType = field(init=False)
    name: str | None = field(default=None)
    desc: str | None = field(default=None)
    __compiler_cache: dict[tuple, Callable[[T_contra], bool]] = field(
        default_factory=dict,
        init=False,
        repr=False,
        hash=False,
        compare=False,
    )

    def __call__(
        self,
        ctx: T_contra,
        /,
        *,
        fail_skip: tuple[type[Exception], ...] | None = None,
    ) -> bool:
        """
        Evaluate the predicate tree against ``ctx``.

        The tree is compiled into one function on first use and cached per ``fail_skip``.

        Args:
            ctx: The value under test.
            fail_skip: Exception types a leaf may raise without failing the call. A skipped leaf
                evaluates to the neutral value of its enclosing operator.
        """
        runner = self.__compiler_cache.get(fail_skip)
        if runner is None:
            runner = Compiler(fail_skip=fail_skip).compile(self)
            self.__compiler_cache[fail_skip] = runner
        return runner(ctx)

    def __and__(self, other: Predicate[T_contra]) -> Predicate[T_contra]:
        """
        Combine this predicate with another using logical AND.
        """
        if not is_predicate(other):
            return NotImplemented
        return _PredicateAnd(children=(self, other))

    def __or__(self, other: Predicate[T_contra]) -> Predicate[T_contra]:
        if not is_predicate(other):
            return NotImplemented
        return _PredicateOr(children=(self, other))

    def __invert__(self) -> Predicate[T_contra]:
        return _PredicateNot(op=self)


def predicate(
    fn: PredicateFn[T_contra],
    *,
    name: str | None = None,
    desc: str | None = None,
) -> Predicate[T_contra]:
    """
    Create a Predicate from the function.
    """

    return _PredicateLeaf(fn=fn, name=name or getattr(fn, "__name__", None), desc=desc or fn.__doc__)


def all_of(predicates: Iterable[Predicate[T_contra]]) -> Predicate[T_contra]:
    """
    Combine predicates into one n-ary AND node. A single predicate is returned as is.

    Raises:
        EmptyCompositionError: If ``predicates`` is empty.
    """
    children = tuple(predicates)
    if not children:
        raise EmptyCompositionError("all_of")
    if len(children) == 1:
        return children[0]
    return _PredicateAnd(children=children)


def any_of(predicates: Iterable[Predicate[T_contra]]) -> Predicate[T_contra]:
    """
    Combine predicates into one n-ary OR node. A single predicate is returned as is.

    Raises:
        EmptyCompositionError: If ``predicates`` is empty.
    """
    children = tuple(predicates)
    if not children:
        raise EmptyCompositionError("any_of")
    if len(children) == 1:
        return children[0]
    return _PredicateOr(children=children)


@dataclass(frozen=True, kw_only=True)
@final
class _PredicateLeaf(Predicate[T_contra]):
    """
    Leaf node in the predicate tree.
    """

    node_type: Literal["leaf"] = field(default="leaf", init=False)
    fn: PredicateFn[T_contra]


@dataclass(frozen=True, kw_only=True)
@final
class _PredicateAnd(Predicate[T_contra]):
    """
    AND node. Children are evaluated left to right and stop at the first failure.
    """

    node_type: Literal["and"] = field(default="and", init=False)
    children: tuple[Predicate[T_contra], ...]


@dataclass(frozen=True, kw_only=True)
@final
class _PredicateOr(Predicate[T_contra]):
    """
    OR node. Children are evaluated left to right and stop at the first success.
    """

    node_type: Literal["or"] = field(default="or", init=False)
    children: tuple[Predicate[T_contra], ...]


@dataclass(frozen=True, kw_only=True)
@final
class _PredicateNot(Predicate[T_contra]):
    """
    Negation node.
    """

    node_type: Literal["not"] = field(default="not", init=False)
    op: Predicate[T_contra]


PredicateNode: TypeAlias = (
    _PredicateLeaf[T_contra] | _PredicateAnd[T_contra] | _PredicateOr[T_contra] | _PredicateNot[T_contra]
)


def is_predicate(p: Any) -> TypeGuard[Predicate]:  # noqa: ANN401
    """
    Check if the given object is a valid predicate.
    """

    return isinstance(p, Predicate)


class Compiler:
    """
    Compiles a predicate tree into a single function whose body is one boolean expression.

    Nested AND / OR chains are flattened into n-ary ``ast.BoolOp`` nodes so evaluation uses the
    interpreter's native short-circuiting instead of recursive calls.
    """

    class Frame(NamedTuple):
        """
        Represents a stack entry for predicate compilation.
        """

        node: Predicate | tuple[Literal["FLATTENED"], LogicBinOp, int]
        visited: bool
        fallback: bool

    def __init__(
        self,
        *,
        fail_skip: tuple[type[Exception], ...] | None,
    ):
        self.fail_skip = fail_skip or ()

        self._leaf_counter = 0
        self._leaf_names: dict[tuple[int, bool], str] = {}
        self._namespace: dict[str, Any] = {}

    def compile(self, p: Predicate[T_contra]) -> Callable[[T_contra], bool]:
        """
        Build and return the compiled function for ``p``.
        """
        stack = [self.Frame(p, visited=False, fallback=False)]
        results: list[ast.expr] = []

        while stack:
            node, visited, fallback = stack.pop()

            if isinstance(node, tuple):
                _, op, count = node
                values = results[-count:]
                del results[-count:]
                results.append(ast.BoolOp(op=ast.And() if op == "and" else ast.Or(), values=values))
                continue

            if visited:
                # Only NOT nodes are revisited, once their operand is on the result stack.
                results.append(ast.UnaryOp(op=ast.Not(), operand=results.pop()))
                continue

            match node:
                case _PredicateLeaf() as leaf:
                    results.append(self._leaf_call(leaf, fallback))
                case _PredicateAnd(node_type=op) | _PredicateOr(node_type=op):
                    chain = self._flatten(node, op)
                    stack.append(self.Frame(("FLATTENED", op, len(chain)), visited=False, fallback=fallback))
                    # A skipped child must not decide the result of its parent.
                    child_fallback = op == "and"
                    stack.extend(self.Frame(child, visited=False, fallback=child_fallback) for child in reversed(chain))
                case _PredicateNot(op=operand):
                    stack.append(self.Frame(node, visited=True, fallback=fallback))
                    stack.append(self.Frame(operand, visited=False, fallback=not fallback))
                case _:
                    assert_never(node)

        func_def = ast.FunctionDef(
            name=COMPILED_PREDICATE,
            args=ast.arguments(
                posonlyargs=[],
                args=[ast.arg(arg="ctx")],
                vararg=None,
                kwonlyargs=[],
                kw_defaults=[],
                kwarg=None,
                defaults=[],
            ),
            body=[ast.Return(value=results.pop())],
            decorator_list=[],
            returns=None,
            type_params=[],
        )
        module = ast.Module(body=[func_def], type_ignores=[])
        self._fix_locations(module)

        code_obj = compile(module, filename="<predicate>", mode="exec")
        exec(code_obj, self._namespace)  # noqa: S102

        logger.debug("Compiled predicate %r with %d leaves", p.name or p.node_type, self._leaf_counter)
        return self._namespace[COMPILED_PREDICATE]

    @staticmethod
    def _flatten(node: Predicate, op: LogicBinOp) -> list[Predicate]:
        chain: list[Predicate] = []
        pending = [node]
        while pending:
            current = pending.pop()
            if isinstance(current, (_PredicateAnd, _PredicateOr)) and current.node_type == op:
                pending.extend(reversed(current.children))
            else:
                chain.append(current)
        return chain

    def _leaf_call(self, leaf: _PredicateLeaf, fallback: bool) -> ast.Call:  # noqa: FBT001
        # The same leaf may sit under operators with different fallbacks.
        key = (id(leaf), fallback)
        name = self._leaf_names.get(key)
        if name is None:
            name = f"_leaf_{self._leaf_counter}"
            self._leaf_counter += 1
            self._leaf_names[key] = name
            self._namespace[name] = self._wrap_with_fail_skip(leaf, fallback) if self.fail_skip else leaf.fn

        return ast.Call(func=ast.Name(id=name, ctx=ast.Load()), args=[ast.Name(id="ctx", ctx=ast.Load())], keywords=[])

    def _wrap_with_fail_skip(self, leaf: _PredicateLeaf, fallback: bool) -> Callable[[Any], bool]:  # noqa: FBT001
        fn = leaf.fn
        skipped = self.fail_skip

        def wrapper(ctx: Any) -> bool:  # noqa: ANN401
            try:
                return fn(ctx)
            except skipped:
                return fallback

        return wrapper

    @staticmethod
    def _fix_locations(root: ast.AST) -> None:
        """
        Iterative ast.fix_missing_locations, so deep predicate chains do not hit the recursion limit.
        """
        stack = [root]
        while stack:
            node = stack.pop()
            if "lineno" in node._attributes and getattr(node, "lineno", None) is None:
                node.lineno = 1
                node.col_offset = 0
                node.end_lineno = 1
                node.end_col_offset = 0
            stack.extend(ast.iter_child_nodes(node))
