from __future__ import annotations
import copy
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum as _Enum
from typing import Any, ClassVar

from .errors import DefinitionError, InvalidChecker, NotAnObject
from .typing import MISSING, is_scalar, kind_of, render

PRIMITIVE_NAMES = ("string", "number", "boolean", "function", "object", "any")


class CheckerKind(str, _Enum):
    PRIMITIVE = "primitive"
    INTERFACE = "interface"
    ENUM = "enum"
    ARRAY = "array"
    OPTIONAL = "optional"
    MAP = "map"
    LITERAL = "literal"
    UNION = "union"
    KEYOF = "keyof"


@dataclass(frozen=True, eq=False)
class Checker:
    """Base of every checker. Being an instance of it is what makes a value a checker."""
    kind: ClassVar[CheckerKind]

    def __str__(self) -> str:
        from .report import describe
        return describe(self)


@dataclass(frozen=True)
class Field:
    name: str
    checker: Checker
    optional: bool = False


@dataclass(frozen=True, eq=False)
class PrimitiveChecker(Checker):
    kind: ClassVar[CheckerKind] = CheckerKind.PRIMITIVE
    name: str


@dataclass(frozen=True, eq=False)
class InterfaceChecker(Checker):
    kind: ClassVar[CheckerKind] = CheckerKind.INTERFACE
    fields: tuple[Field, ...]


@dataclass(frozen=True, eq=False)
class EnumChecker(Checker):
    kind: ClassVar[CheckerKind] = CheckerKind.ENUM
    options: tuple[Any, ...]


@dataclass(frozen=True, eq=False)
class ArrayChecker(Checker):
    kind: ClassVar[CheckerKind] = CheckerKind.ARRAY
    element: Checker


@dataclass(frozen=True, eq=False)
class OptionalChecker(Checker):
    kind: ClassVar[CheckerKind] = CheckerKind.OPTIONAL
    inner: Checker


@dataclass(frozen=True, eq=False)
class MapChecker(Checker):
    kind: ClassVar[CheckerKind] = CheckerKind.MAP
    values: Checker


@dataclass(frozen=True, eq=False)
class LiteralChecker(Checker):
    """Deep equality against a captured value.

    Object references are split into ``fields`` (each holding a nested literal),
    array references into ``items``; scalars keep only ``value``.
    """
    kind: ClassVar[CheckerKind] = CheckerKind.LITERAL
    value: Any
    fields: tuple[Field, ...] | None = None
    items: tuple[LiteralChecker, ...] | None = None


@dataclass(frozen=True, eq=False)
class UnionChecker(Checker):
    kind: ClassVar[CheckerKind] = CheckerKind.UNION
    alternatives: tuple[Checker, ...]


@dataclass(frozen=True, eq=False)
class KeyOfChecker(Checker):
    kind: ClassVar[CheckerKind] = CheckerKind.KEYOF
    keys: tuple[str, ...]


def is_checker(value: Any) -> bool:
    return isinstance(value, Checker)


def ensure_checker(value: Any) -> Checker:
    if not isinstance(value, Checker):
        raise InvalidChecker(f"Not a valid type checker: {render(value)}", value=value)
    return value


def split_key(key: Any) -> tuple[str, bool]:
    """``"name?"`` -> ``("name", True)``; ``"name"`` -> ``("name", False)``."""
    if not isinstance(key, str):
        raise DefinitionError(f"Field names must be strings, got {render(key)}", value=key)
    if key.endswith("?"):
        return key[:-1], True
    return key, False


def _normalize_fields(entries: Iterable[Field], what: str) -> tuple[Field, ...]:
    fields: list[Field] = []
    seen: set[str] = set()
    for entry in entries:
        if entry.name in seen:
            raise DefinitionError(f"Duplicate {what} key: {entry.name}", value=entry.name)
        seen.add(entry.name)
        fields.append(entry)
    return tuple(fields)


# constructors

def Primitive(name: str) -> PrimitiveChecker:
    if name not in PRIMITIVE_NAMES:
        raise DefinitionError(
            f"Unknown primitive type: {render(name)}, expected one of: {' | '.join(PRIMITIVE_NAMES)}",
            value=name,
        )
    return PrimitiveChecker(name)


def Interface(fields: Mapping[str, Checker] | Iterable[Field]) -> InterfaceChecker:
    """Exact object shape. Keys ending in ``?`` (or ``Field(..., optional=True)``) may be absent."""
    if isinstance(fields, Mapping):
        entries = []
        for key, checker in fields.items():
            name, optional = split_key(key)
            entries.append(Field(name, ensure_checker(checker), optional))
    elif isinstance(fields, Iterable) and not isinstance(fields, (str, bytes)):
        entries = list(fields)
        for entry in entries:
            if not isinstance(entry, Field):
                raise DefinitionError(f"Interface entries must be Field values, got {render(entry)}", value=entry)
            ensure_checker(entry.checker)
    else:
        raise NotAnObject(f"Not a valid object: {render(fields)}", value=fields)
    if not entries:
        raise DefinitionError("Object is empty", value=fields)
    return InterfaceChecker(_normalize_fields(entries, "interface"))


def Enum(values: list[Any] | tuple[Any, ...]) -> EnumChecker:
    if not isinstance(values, (list, tuple)):
        raise DefinitionError("Enum definition must be in an array", value=values)
    if not values:
        raise DefinitionError("Enum definition must not be empty", value=values)
    for option in values:
        if not is_scalar(option):
            raise DefinitionError(f"Enum options must be primitive values, got {render(option)}", value=option)
    return EnumChecker(tuple(values))


def Array(element: Checker) -> ArrayChecker:
    return ArrayChecker(ensure_checker(element))


def Optional(inner: Checker) -> OptionalChecker:
    return OptionalChecker(ensure_checker(inner))


def Map(values: Checker) -> MapChecker:
    return MapChecker(ensure_checker(values))


def _capture(value: Any) -> LiteralChecker:
    kind = kind_of(value)
    if kind == "object":
        entries = []
        for key, child in value.items():
            name, optional = split_key(key)
            entries.append(Field(name, _capture(child), optional))
        return LiteralChecker(copy.deepcopy(value), fields=_normalize_fields(entries, "literal"))
    if kind == "array":
        return LiteralChecker(copy.deepcopy(value), items=tuple(_capture(item) for item in value))
    return LiteralChecker(value)


def Literal(value: Any = MISSING) -> LiteralChecker:
    if value is MISSING:
        raise DefinitionError("Missing literal value to use")
    return _capture(value)


def Union(*alternatives: Any) -> UnionChecker:
    """Any one of the alternatives. Plain values are wrapped in ``Literal``."""
    if not alternatives:
        raise DefinitionError("Union needs at least one alternative")
    return UnionChecker(tuple(a if isinstance(a, Checker) else Literal(a) for a in alternatives))


def KeyOf(reference: Mapping[str, Any]) -> KeyOfChecker:
    if not isinstance(reference, Mapping):
        raise NotAnObject(f"Not a valid object: {render(reference)}", value=reference)
    return KeyOfChecker(tuple(k for k in reference.keys() if isinstance(k, str)))
