"""Runtime shape checks for plain Python values.

    from tscheck import Interface, Optional, Union, number, param, string

    User = Interface({"id": number, "name": string, "nick?": string, "role": Union("admin", "user")})
    param(User, {"id": 1, "name": "Ada", "role": "admin"})
"""
from .checkers import (
    Array,
    Checker,
    CheckerKind,
    Enum,
    Field,
    Interface,
    KeyOf,
    Literal,
    Map,
    Optional,
    Primitive,
    Union,
    is_checker,
)
from .engine import validate
from .errors import (
    ArityOutOfRange,
    DefinitionError,
    EnumRejected,
    ErrorCode,
    InvalidChecker,
    KeyLookupFailed,
    LiteralMismatch,
    MissingKey,
    NotAnArray,
    NotAnObject,
    SchemaFileError,
    TscheckError,
    TypeMismatch,
    UnexpectedKey,
    UnionExhausted,
    ValidationError,
)
from .params import checked, is_valid, multi_params, param
from .prelude import any, boolean, function, number, object, string  # noqa: A004
from .report import Diagnostic, describe
from .schema_loader import Schema, load_schema, loads_schema
from .typing import MISSING, deep_equal

__version__ = "0.1.0"

# ``any`` and ``object`` stay out of ``__all__`` so star imports keep the builtins.
__all__ = [
    "Array",
    "Checker",
    "CheckerKind",
    "Enum",
    "Field",
    "Interface",
    "KeyOf",
    "Literal",
    "Map",
    "Optional",
    "Primitive",
    "Union",
    "is_checker",
    "validate",
    "param",
    "multi_params",
    "is_valid",
    "checked",
    "describe",
    "Diagnostic",
    "Schema",
    "load_schema",
    "loads_schema",
    "MISSING",
    "deep_equal",
    "string",
    "number",
    "boolean",
    "function",
    "ErrorCode",
    "TscheckError",
    "DefinitionError",
    "SchemaFileError",
    "ValidationError",
    "InvalidChecker",
    "TypeMismatch",
    "MissingKey",
    "UnexpectedKey",
    "NotAnObject",
    "NotAnArray",
    "EnumRejected",
    "UnionExhausted",
    "LiteralMismatch",
    "KeyLookupFailed",
    "ArityOutOfRange",
]
