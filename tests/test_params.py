import pytest

from tscheck import (
    ArityOutOfRange,
    DefinitionError,
    ErrorCode,
    Interface,
    InvalidChecker,
    MissingKey,
    Optional,
    TypeMismatch,
    Union,
    UnionExhausted,
    boolean,
    checked,
    is_valid,
    multi_params,
    number,
    param,
    string,
)
from tscheck.params import arity


def test_param_passes_silently():
    assert param(string, "hello") is None


def test_param_rejects_non_checker():
    with pytest.raises(InvalidChecker, match="Not a valid type checker"):
        param("string", "hello")


def test_is_valid():
    assert is_valid(number, 1)
    assert not is_valid(number, "1")
    with pytest.raises(InvalidChecker):
        is_valid(None, 1)


def test_arity_counts_optional_checkers():
    assert arity([string, number, Optional(boolean)]) == (2, 3)
    assert arity([Optional(string)]) == (0, 1)
    assert arity([]) == (0, 0)


def test_multi_params_returns_args_unchanged():
    args = ("Alice", 30)
    assert multi_params(args, [string, number]) is args
    name, age = multi_params(["Alice", 30], [string, number])
    assert (name, age) == ("Alice", 30)


def test_multi_params_arity_message():
    with pytest.raises(ArityOutOfRange, match="Expecting 2-2 arguments, received 1") as exc:
        multi_params(["Alice"], [string, number])
    assert exc.value.code is ErrorCode.ARITY_OUT_OF_RANGE


@pytest.mark.parametrize("count, ok", [(1, False), (2, True), (3, True), (4, False)])
def test_multi_params_optional_bounds(count, ok):
    checkers = [string, string, Optional(string)]
    args = ["x"] * count
    if ok:
        assert multi_params(args, checkers) is args
    else:
        with pytest.raises(ArityOutOfRange, match=f"Expecting 2-3 arguments, received {count}"):
            multi_params(args, checkers)


def test_multi_params_arity_checked_before_arguments():
    with pytest.raises(ArityOutOfRange):
        multi_params([42], [string, number])


def test_multi_params_positional_mismatch():
    with pytest.raises(TypeMismatch, match="Not a valid string type: '42'"):
        multi_params([42, 30], [string, number])


def test_multi_params_unsupplied_optional_argument():
    address = Interface({"street": string, "city": string})
    checkers = [string, number, Union("admin", "user", "guest"), Optional(address)]
    assert multi_params(["Alice", 30, "admin"], checkers) == ["Alice", 30, "admin"]
    multi_params(["Bob", 25, "user", {"street": "1 Main St", "city": "Portland"}], checkers)
    with pytest.raises(UnionExhausted):
        multi_params(["Eve", 22, "superuser"], checkers)


def test_multi_params_non_trailing_optional():
    # two checkers, one optional: a single argument lands on the first slot
    with pytest.raises(TypeMismatch, match="Not a valid number type: 'undefined'"):
        multi_params(["x"], [Optional(string), number])


def test_multi_params_argument_types():
    with pytest.raises(DefinitionError, match="Expecting an array of types"):
        multi_params(["x"], string)
    with pytest.raises(TypeMismatch, match="Expecting an array of arguments"):
        multi_params("x", [string])
    with pytest.raises(InvalidChecker):
        multi_params(["x"], ["string"])


def test_checked_decorator():
    config = Interface({"host": string, "port": number, "ssl?": boolean})

    @checked(config, Optional(number))
    def connect(cfg, timeout=None):
        """Open a connection."""
        return f"{cfg['host']}:{cfg['port']}", timeout

    assert connect({"host": "localhost", "port": 3000}) == ("localhost:3000", None)
    assert connect({"host": "localhost", "port": 3000, "ssl": True}, 5) == ("localhost:3000", 5)
    assert connect.__name__ == "connect"
    assert connect.__doc__ == "Open a connection."
    with pytest.raises(MissingKey, match="Missing required key: port"):
        connect({"host": "localhost"})
    with pytest.raises(ArityOutOfRange):
        connect()


def test_checked_rejects_bad_checkers_at_decoration():
    with pytest.raises(InvalidChecker):
        checked(string, int)
