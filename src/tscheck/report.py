from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, NoReturn, Sequence, Union

from .checkers import (
    ArrayChecker,
    Checker,
    EnumChecker,
    InterfaceChecker,
    KeyOfChecker,
    LiteralChecker,
    MapChecker,
    OptionalChecker,
    PrimitiveChecker,
    UnionChecker,
)
from .errors import TscheckError, ValidationError
from .typing import render

Segment = Union[str, int]
Path = tuple[Segment, ...]

ROOT = "@"
VERSION = "tscheck/1"


def format_path(path: Sequence[Segment]) -> str:
    out = ROOT
    for seg in path:
        if isinstance(seg, int):
            out += f".[{seg}]"
        else:
            out += f".[{json.dumps(seg, ensure_ascii=False)}]"
    return out


def fail(error: type[ValidationError], message: str, path: Sequence[Segment], value: Any) -> NoReturn:
    raise error(message, format_path(path), value)


@dataclass
class Diagnostic:
    code: str
    message: str
    path: str | None
    value: str
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_error(cls, err: TscheckError, **extra: Any) -> Diagnostic:
        return cls(code=err.code.value, message=err.message, path=err.path, value=render(err.value), extra=extra)

    def to_json_obj(self) -> dict:
        return {
            **self.extra,
            "$version": VERSION,
            "code": self.code,
            "message": self.message,
            "path": self.path,
            "value": self.value,
        }


def describe(checker: Checker) -> str:
    """TypeScript-flavoured text for a checker tree."""
    if isinstance(checker, PrimitiveChecker):
        return checker.name
    if isinstance(checker, InterfaceChecker):
        parts = [f"{f.name}{'?' if f.optional else ''}: {describe(f.checker)}" for f in checker.fields]
        return "{ " + "; ".join(parts) + " }"
    if isinstance(checker, EnumChecker):
        return " | ".join(render(o) for o in checker.options)
    if isinstance(checker, ArrayChecker):
        return f"Array<{describe(checker.element)}>"
    if isinstance(checker, OptionalChecker):
        return f"Optional<{describe(checker.inner)}>"
    if isinstance(checker, MapChecker):
        return f"Record<string, {describe(checker.values)}>"
    if isinstance(checker, LiteralChecker):
        return render(checker.value)
    if isinstance(checker, UnionChecker):
        return " | ".join(
            f"({describe(a)})" if isinstance(a, UnionChecker) else describe(a) for a in checker.alternatives
        )
    if isinstance(checker, KeyOfChecker):
        return "keyof { " + ", ".join(checker.keys) + " }"
    return repr(checker)
