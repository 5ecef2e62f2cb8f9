from __future__ import annotations
from typing import Any, Callable, Mapping

from .checkers import (
    ArrayChecker,
    Checker,
    CheckerKind,
    EnumChecker,
    Field,
    InterfaceChecker,
    KeyOfChecker,
    LiteralChecker,
    MapChecker,
    OptionalChecker,
    PrimitiveChecker,
    UnionChecker,
    ensure_checker,
)
from .errors import (
    EnumRejected,
    KeyLookupFailed,
    LiteralMismatch,
    MissingKey,
    NotAnArray,
    NotAnObject,
    TypeMismatch,
    UnexpectedKey,
    UnionExhausted,
    ValidationError,
)
from .report import Path, fail, format_path
from .typing import MISSING, deep_equal, kind_of, render, text


def validate(checker: Checker, value: Any, path: Path = ()) -> None:
    """Match ``value`` against ``checker``, raising on the first mismatch."""
    checker = ensure_checker(checker)
    _HANDLERS[checker.kind](checker, value, path)


def _require_object(value: Any, path: Path) -> Mapping[Any, Any]:
    if kind_of(value) != "object":
        fail(NotAnObject, f"Not a valid object: {render(value)}", path, value)
    return value


def _check_keys(fields: tuple[Field, ...], value: Mapping[Any, Any], path: Path) -> None:
    # missing keys are reported before unexpected ones
    for f in fields:
        if not f.optional and f.name not in value:
            fail(MissingKey, f"Missing required key: {f.name}", path, value)
    names = {f.name for f in fields}
    for key in value:
        if key not in names:
            fail(UnexpectedKey, f"Unexpected key: {render(key)}", path, key)


def _primitive(checker: PrimitiveChecker, value: Any, path: Path) -> None:
    if checker.name == "any":
        return
    if checker.name == "object":
        _require_object(value, path)
        return
    if kind_of(value) != checker.name:
        fail(TypeMismatch, f"Not a valid {checker.name} type: '{text(value)}'", path, value)


def _interface(checker: InterfaceChecker, value: Any, path: Path) -> None:
    obj = _require_object(value, path)
    _check_keys(checker.fields, obj, path)
    for f in checker.fields:
        if f.name in obj:
            validate(f.checker, obj[f.name], path + (f.name,))


def _enum(checker: EnumChecker, value: Any, path: Path) -> None:
    for option in checker.options:
        if deep_equal(option, value):
            return
    accepted = " | ".join(text(o) for o in checker.options)
    fail(EnumRejected, f"Not a valid option: '{text(value)}', accepted options are: {accepted}", path, value)


def _array(checker: ArrayChecker, value: Any, path: Path) -> None:
    if kind_of(value) != "array":
        fail(NotAnArray, f"Not a valid array type: {render(value)}", path, value)
    for i, item in enumerate(value):
        validate(checker.element, item, path + (i,))


def _optional(checker: OptionalChecker, value: Any, path: Path) -> None:
    if value is MISSING or value is None:
        return
    validate(checker.inner, value, path)


def _segment(key: Any) -> str | int:
    # int keys keep rendering as .[1], distinct from the string key .["1"]
    if isinstance(key, str) or (isinstance(key, int) and not isinstance(key, bool)):
        return key
    return render(key)


def _map(checker: MapChecker, value: Any, path: Path) -> None:
    obj = _require_object(value, path)
    for key, item in obj.items():
        validate(checker.values, item, path + (_segment(key),))


def _literal(checker: LiteralChecker, value: Any, path: Path) -> None:
    if checker.fields is not None:
        if kind_of(value) != "object":
            fail(LiteralMismatch, f"Does not meet the literal type: {render(value)}, at {format_path(path)}", path, value)
        _check_keys(checker.fields, value, path)
        for f in checker.fields:
            if f.name in value:
                _literal(f.checker, value[f.name], path + (f.name,))
    elif checker.items is not None:
        if kind_of(value) != "array":
            fail(LiteralMismatch, f"Does not meet the literal type: {render(value)}, at {format_path(path)}", path, value)
        if len(value) != len(checker.items):
            fail(
                LiteralMismatch,
                f"Expected {len(checker.items)} elements, received {len(value)}, at {format_path(path)}",
                path,
                value,
            )
        for i, (item, actual) in enumerate(zip(checker.items, value)):
            _literal(item, actual, path + (i,))
    elif not deep_equal(checker.value, value):
        fail(LiteralMismatch, f"Unexpected literal value: {render(value)}, at {format_path(path)}", path, value)


def _union(checker: UnionChecker, value: Any, path: Path) -> None:
    for alternative in checker.alternatives:
        try:
            validate(alternative, value, path)
        except ValidationError:
            continue
        return
    fail(UnionExhausted, f"Value {render(value)} is not assignable to union", path, value)


def _keyof(checker: KeyOfChecker, value: Any, path: Path) -> None:
    if not isinstance(value, str) or value not in checker.keys:
        fail(KeyLookupFailed, f"Key {text(value)} is invalid", path, value)


_HANDLERS: dict[CheckerKind, Callable[[Any, Any, Path], None]] = {
    CheckerKind.PRIMITIVE: _primitive,
    CheckerKind.INTERFACE: _interface,
    CheckerKind.ENUM: _enum,
    CheckerKind.ARRAY: _array,
    CheckerKind.OPTIONAL: _optional,
    CheckerKind.MAP: _map,
    CheckerKind.LITERAL: _literal,
    CheckerKind.UNION: _union,
    CheckerKind.KEYOF: _keyof,
}

_unhandled = set(CheckerKind) - set(_HANDLERS)
if _unhandled:
    raise RuntimeError(f"No matcher for checker kinds: {sorted(k.value for k in _unhandled)}")
