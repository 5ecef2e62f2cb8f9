from __future__ import annotations
import json
from collections.abc import Mapping
from typing import Any, Literal

Kind = Literal["undefined", "null", "boolean", "number", "string", "array", "object", "function", "instance"]

SCALAR_KINDS = frozenset({"null", "boolean", "number", "string"})


class _Missing:
    """Stands in for a value that is absent, like an argument that was never passed."""
    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def kind_of(value: Any) -> Kind:
    if value is MISSING: return "undefined"
    if value is None: return "null"
    if isinstance(value, bool): return "boolean"
    if isinstance(value, (int, float)): return "number"
    if isinstance(value, str): return "string"
    if isinstance(value, (list, tuple)): return "array"
    if isinstance(value, Mapping): return "object"
    if callable(value): return "function"
    return "instance"


def is_scalar(value: Any) -> bool:
    return kind_of(value) in SCALAR_KINDS


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality over JSON-like values.

    Kinds must agree before values are compared, so ``True`` never equals ``1``
    and ``"1"`` never equals ``1``. Arrays compare element-wise, objects compare
    key sets and then values.
    """
    kind = kind_of(a)
    if kind != kind_of(b):
        return False
    if kind == "array":
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b))
    if kind == "object":
        if set(a.keys()) != set(b.keys()):
            return False
        return all(deep_equal(a[k], b[k]) for k in a)
    if kind in ("function", "instance"):
        return a is b
    return a == b


def _unrenderable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(type(value).__name__)


def render(value: Any) -> str:
    """JSON text for a value, falling back to ``repr`` for anything JSON cannot hold."""
    if value is MISSING:
        return "undefined"
    try:
        return json.dumps(value, ensure_ascii=False, default=_unrenderable)
    except (TypeError, ValueError):
        return repr(value)


def text(value: Any) -> str:
    """Like ``render`` but leaves strings unquoted."""
    if isinstance(value, str):
        return value
    return render(value)
