"""Declarative schema files.

A schema file is TOML with one ``[types]`` table. Each entry is a type
expression: a primitive or type name as a string, or a single-key table naming
a checker constructor::

    [types.Role]
    enum = ["admin", "editor", "viewer"]

    [types.User]
    interface = { id = "number", name = "string", "email?" = "string", role = "Role" }

    [types.Users]
    array = "User"

Inside ``union`` arrays, strings are type references and other scalars are
literal values. Names may be used before they are declared.
"""
from __future__ import annotations
import json
import pathlib
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

import structlog
import tomli

from .checkers import (
    PRIMITIVE_NAMES,
    Array,
    Checker,
    Enum,
    Interface,
    KeyOf,
    Literal,
    Map,
    Optional,
    Primitive,
    Union,
)
from .errors import SchemaFileError, TscheckError
from .typing import render

logger = structlog.get_logger()


@dataclass
class Schema:
    types: Dict[str, Checker]
    source: str = "<string>"
    declared: list[str] = field(default_factory=list)

    def __contains__(self, name: str) -> bool:
        return name in self.types

    def checker(self, name: str) -> Checker:
        if name not in self.types:
            known = ", ".join(self.declared) or "none"
            raise SchemaFileError(f"Unknown type {name!r} in {self.source} (declared: {known})", value=name)
        return self.types[name]


class _Resolver:
    def __init__(self, decls: Dict[str, Any]):
        self.decls = decls
        self.done: Dict[str, Checker] = {}
        self.active: list[str] = []
        self.forms: Dict[str, Callable[[Any, str], Checker]] = {
            "interface": self._interface,
            "enum": lambda arg, where: Enum(arg),
            "array": lambda arg, where: Array(self.expr(arg, f"{where}.array")),
            "optional": lambda arg, where: Optional(self.expr(arg, f"{where}.optional")),
            "map": lambda arg, where: Map(self.expr(arg, f"{where}.map")),
            "literal": lambda arg, where: Literal(arg),
            "union": self._union,
            "keyof": lambda arg, where: KeyOf(arg),
        }

    def named(self, name: str) -> Checker:
        if name in self.done:
            return self.done[name]
        if name in self.active:
            chain = " -> ".join(self.active + [name])
            raise SchemaFileError(f"Cyclic type reference: {chain}", f"types.{name}", name)
        if name not in self.decls:
            raise SchemaFileError(f"Unknown type: {name}", f"types.{name}", name)
        self.active.append(name)
        try:
            checker = self.expr(self.decls[name], f"types.{name}")
        finally:
            self.active.pop()
        self.done[name] = checker
        return checker

    def expr(self, node: Any, where: str) -> Checker:
        if isinstance(node, str):
            if node in PRIMITIVE_NAMES:
                return Primitive(node)
            return self.named(node)
        if not isinstance(node, dict) or len(node) != 1:
            raise SchemaFileError(
                f"{where}: expected a type name or a single-key table, got {render(node)}", where, node
            )
        (form, arg), = node.items()
        build = self.forms.get(form)
        if build is None:
            raise SchemaFileError(
                f"{where}: unknown form {form!r}, expected one of: {', '.join(self.forms)}", where, node
            )
        try:
            return build(arg, where)
        except SchemaFileError:
            raise
        except TscheckError as err:
            raise SchemaFileError(f"{where}: {err.message}", where, arg) from err

    def _interface(self, arg: Any, where: str) -> Checker:
        if not isinstance(arg, dict):
            raise SchemaFileError(f"{where}: interface needs a table of fields, got {render(arg)}", where, arg)
        return Interface({key: self.expr(sub, f"{where}.{key}") for key, sub in arg.items()})

    def _union(self, arg: Any, where: str) -> Checker:
        if not isinstance(arg, list):
            raise SchemaFileError(f"{where}: union needs an array of alternatives, got {render(arg)}", where, arg)
        alternatives = [
            self.expr(item, f"{where}.union[{i}]") if isinstance(item, (str, dict)) else item
            for i, item in enumerate(arg)
        ]
        return Union(*alternatives)


def build_schema(data: Dict[str, Any], source: str = "<string>") -> Schema:
    decls = data.get("types")
    if not isinstance(decls, dict) or not decls:
        raise SchemaFileError(f"{source}: expected a non-empty [types] table")
    for name in decls:
        if name in PRIMITIVE_NAMES:
            raise SchemaFileError(f"{source}: type name {name!r} is reserved for the primitive checker", f"types.{name}")
    resolver = _Resolver(decls)
    types = {name: resolver.named(name) for name in decls}
    logger.debug("schema_loaded", source=source, types=len(types))
    return Schema(types=types, source=source, declared=list(decls))


def loads_schema(text: str, source: str = "<string>") -> Schema:
    try:
        data = tomli.loads(text)
    except tomli.TOMLDecodeError as err:
        raise SchemaFileError(f"{source}: invalid TOML: {err}") from err
    return build_schema(data, source)


def load_schema(path: str | pathlib.Path) -> Schema:
    try:
        text = pathlib.Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise SchemaFileError(f"Cannot read schema file {path}: {err}") from err
    return loads_schema(text, str(path))


def load_data(path: str | pathlib.Path) -> Any:
    """Read a ``.json`` or ``.toml`` document to validate."""
    p = pathlib.Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise SchemaFileError(f"Cannot read data file {path}: {err}") from err
    suffix = p.suffix.lower()
    try:
        if suffix == ".json":
            return json.loads(text)
        if suffix == ".toml":
            return tomli.loads(text)
    except (json.JSONDecodeError, tomli.TOMLDecodeError) as err:
        raise SchemaFileError(f"{path}: cannot parse data: {err}") from err
    raise SchemaFileError(f"{path}: unsupported data file type {suffix or '(none)'}, expected .json or .toml")
