from __future__ import annotations
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    DEFINITION = "DEFINITION"
    SCHEMA_FILE = "SCHEMA_FILE"
    INVALID_CHECKER = "INVALID_CHECKER"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    MISSING_KEY = "MISSING_KEY"
    UNEXPECTED_KEY = "UNEXPECTED_KEY"
    NOT_AN_OBJECT = "NOT_AN_OBJECT"
    NOT_AN_ARRAY = "NOT_AN_ARRAY"
    ENUM_REJECTED = "ENUM_REJECTED"
    UNION_EXHAUSTED = "UNION_EXHAUSTED"
    LITERAL_MISMATCH = "LITERAL_MISMATCH"
    KEY_LOOKUP_FAILED = "KEY_LOOKUP_FAILED"
    ARITY_OUT_OF_RANGE = "ARITY_OUT_OF_RANGE"


class TscheckError(Exception):
    code: ErrorCode = ErrorCode.DEFINITION

    def __init__(self, message: str, path: str | None = None, value: Any = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.value = value


class DefinitionError(TscheckError):
    """Bad arguments given to a checker constructor."""


class SchemaFileError(DefinitionError):
    code = ErrorCode.SCHEMA_FILE


class ValidationError(TscheckError):
    """A value did not match its checker. Subclasses name the failed rule."""
    code = ErrorCode.TYPE_MISMATCH


class InvalidChecker(ValidationError):
    code = ErrorCode.INVALID_CHECKER


class TypeMismatch(ValidationError):
    code = ErrorCode.TYPE_MISMATCH


class MissingKey(ValidationError):
    code = ErrorCode.MISSING_KEY


class UnexpectedKey(ValidationError):
    code = ErrorCode.UNEXPECTED_KEY


class NotAnObject(ValidationError):
    code = ErrorCode.NOT_AN_OBJECT


class NotAnArray(ValidationError):
    code = ErrorCode.NOT_AN_ARRAY


class EnumRejected(ValidationError):
    code = ErrorCode.ENUM_REJECTED


class UnionExhausted(ValidationError):
    code = ErrorCode.UNION_EXHAUSTED


class LiteralMismatch(ValidationError):
    code = ErrorCode.LITERAL_MISMATCH


class KeyLookupFailed(ValidationError):
    code = ErrorCode.KEY_LOOKUP_FAILED


class ArityOutOfRange(ValidationError):
    code = ErrorCode.ARITY_OUT_OF_RANGE
