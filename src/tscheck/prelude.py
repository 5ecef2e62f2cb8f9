# Shared primitive checkers. ``object`` and ``any`` shadow the builtins in this module.
from __future__ import annotations
from .checkers import Primitive

string = Primitive("string")
number = Primitive("number")
boolean = Primitive("boolean")
function = Primitive("function")
object = Primitive("object")  # noqa: A001
any = Primitive("any")  # noqa: A001
