import copy

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tscheck import (
    Array,
    Interface,
    Literal,
    LiteralMismatch,
    Optional,
    UnexpectedKey,
    Union,
    ValidationError,
    is_valid,
    number,
    string,
    validate,
)
from tscheck import any as any_
from tscheck.report import format_path

scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-10**6, max_value=10**6),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=8),
)
keys = st.text(alphabet="abcdefgh", min_size=1, max_size=4)
json_values = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4),
        st.dictionaries(keys, children, max_size=4),
    ),
    max_leaves=16,
)

PRIMITIVES = {"string": string, "number": number}


@given(scalars)
def test_primitive_matches_exact_kind(value):
    assert is_valid(string, value) == isinstance(value, str)
    assert is_valid(number, value) == (isinstance(value, (int, float)) and not isinstance(value, bool))


@given(st.lists(st.integers()))
def test_array_of_numbers_accepts_any_int_list(items):
    validate(Array(number), items)
    validate(Array(Array(number)), [items, items])


@given(st.lists(st.integers(), min_size=1), st.data())
def test_array_rejects_one_bad_element(items, data):
    index = data.draw(st.integers(min_value=0, max_value=len(items) - 1))
    items[index] = "bad"
    with pytest.raises(ValidationError) as exc:
        validate(Array(number), items)
    assert exc.value.path == format_path((index,))


@given(json_values)
def test_optional_passes_none_and_delegates(value):
    validate(Optional(string), None)
    assert is_valid(Optional(number), value) == (value is None or is_valid(number, value))


@given(json_values)
def test_literal_round_trip(value):
    validate(Literal(value), copy.deepcopy(value))


def _leaf_paths(value, path=()):
    if isinstance(value, dict) and value:
        for k, v in value.items():
            yield from _leaf_paths(v, path + (k,))
    elif isinstance(value, list) and value:
        for i, v in enumerate(value):
            yield from _leaf_paths(v, path + (i,))
    else:
        yield path


def _replace(value, path, new):
    if not path:
        return new
    head, rest = path[0], path[1:]
    value[head] = _replace(value[head], rest, new)
    return value


@settings(max_examples=50)
@given(json_values, st.data())
def test_literal_mutation_reports_exact_path(value, data):
    path = data.draw(st.sampled_from(list(_leaf_paths(value))))
    mutated = _replace(copy.deepcopy(value), path, object())
    with pytest.raises(LiteralMismatch) as exc:
        validate(Literal(value), mutated)
    assert exc.value.path == format_path(path)


@given(st.dictionaries(keys, st.integers(), min_size=1, max_size=5), st.data())
def test_interface_exact_keys(obj, data):
    checker = Interface({k: number for k in obj})
    validate(checker, obj)
    extra = data.draw(keys.filter(lambda k: k not in obj))
    with pytest.raises(UnexpectedKey):
        validate(checker, {**obj, extra: 1})


@given(st.dictionaries(keys, st.integers(), min_size=1, max_size=5), st.data())
def test_interface_optional_fields_may_be_dropped(obj, data):
    checker = Interface({f"{k}?": number for k in obj})
    dropped = data.draw(st.sampled_from(sorted(obj)))
    validate(checker, {k: v for k, v in obj.items() if k != dropped})


@given(json_values)
def test_union_is_either(value):
    a, b = string, Array(any_)
    expected = is_valid(a, value) or is_valid(b, value)
    assert is_valid(Union(a, b), value) == expected
    assert is_valid(Union(b, a), value) == expected
