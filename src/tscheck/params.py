from __future__ import annotations
import functools
from typing import Any, Callable, Sequence, TypeVar

from .checkers import Checker, OptionalChecker, ensure_checker
from .engine import validate
from .errors import ArityOutOfRange, DefinitionError, TypeMismatch, ValidationError
from .report import format_path
from .typing import MISSING, render

F = TypeVar("F", bound=Callable[..., Any])


def param(checker: Checker, value: Any) -> None:
    validate(ensure_checker(checker), value)


def is_valid(checker: Checker, value: Any) -> bool:
    checker = ensure_checker(checker)
    try:
        validate(checker, value)
    except ValidationError:
        return False
    return True


def arity(checkers: Sequence[Checker]) -> tuple[int, int]:
    """(non-Optional checker count, total checker count)"""
    required = sum(1 for c in checkers if not isinstance(c, OptionalChecker))
    return required, len(checkers)


def multi_params(args: Sequence[Any], checkers: Sequence[Checker]) -> Sequence[Any]:
    """Check positional ``args`` against ``checkers`` and hand ``args`` back unchanged.

        def greet(*args):
            name, age = multi_params(args, [string, number])
    """
    if not isinstance(checkers, (list, tuple)):
        raise DefinitionError(f"Expecting an array of types, received: {render(checkers)}", value=checkers)
    if not isinstance(args, (list, tuple)):
        raise TypeMismatch(f"Expecting an array of arguments, received: {render(args)}", format_path(()), args)
    for checker in checkers:
        ensure_checker(checker)

    low, high = arity(checkers)
    if not low <= len(args) <= high:
        raise ArityOutOfRange(f"Expecting {low}-{high} arguments, received {len(args)}", format_path(()), list(args))

    for i, checker in enumerate(checkers):
        validate(checker, args[i] if i < len(args) else MISSING)
    return args


def checked(*checkers: Checker) -> Callable[[F], F]:
    """Decorator running ``multi_params`` over a function's positional arguments.

    Keyword arguments are passed through unchecked.
    """
    for checker in checkers:
        ensure_checker(checker)

    def decorate(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            multi_params(args, checkers)
            return fn(*args, **kwargs)
        return wrapper  # type: ignore[return-value]

    return decorate
