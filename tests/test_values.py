import pytest

from wentpy.ast import INT64_MAX, INT64_MIN
from wentpy.runtime import (
    FALSE,
    NULL,
    TRUE,
    MapScope,
    OrderingError,
    Scope,
    WList,
    WMap,
    WNumber,
    WString,
    from_python,
    to_python,
    w_bool,
    wrap_int64,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 0),
        (INT64_MAX, INT64_MAX),
        (INT64_MAX + 1, INT64_MIN),
        (INT64_MIN - 1, INT64_MAX),
        (1 << 64, 0),
    ],
)
def test_wrap_int64(value: int, expected: int) -> None:
    assert wrap_int64(value) == expected


@pytest.mark.parametrize(
    "value",
    [NULL, FALSE, WNumber(0), WNumber(0.0), WString(""), WList(), WMap()],
)
def test_zero_values(value) -> None:
    assert value.is_zero_value()
    assert not value.is_truthy()


@pytest.mark.parametrize(
    "value",
    [TRUE, WNumber(-1), WNumber(0.5), WString("0"), WList((NULL,)), WMap({"k": NULL})],
)
def test_non_zero_values(value) -> None:
    assert not value.is_zero_value()
    assert value.is_truthy()


def test_type_names() -> None:
    assert NULL.type_name == "null"
    assert TRUE.type_name == "bool"
    assert WNumber(1).type_name == "int"
    assert WNumber(1.0).type_name == "float"
    assert WString("").type_name == "string"
    assert WList().type_name == "list"
    assert WMap().type_name == "map"


def test_equality_is_structural_and_numeric_across_kinds() -> None:
    assert WNumber(1).equals(WNumber(1.0))
    assert not WNumber(1).equals(WString("1"))
    assert WList((WNumber(1), WString("a"))).equals(WList((WNumber(1.0), WString("a"))))
    assert not WList((WNumber(1),)).equals(WList((WNumber(1), WNumber(2))))
    assert WMap({"a": TRUE, "b": NULL}).equals(WMap({"b": NULL, "a": TRUE}))
    assert not WMap({"a": TRUE}).equals(WMap({"a": FALSE}))
    assert NULL.equals(NULL)
    assert not NULL.equals(FALSE)


def test_w_bool_returns_singletons() -> None:
    assert w_bool(True) is TRUE
    assert w_bool(False) is FALSE


def test_ordering() -> None:
    assert WNumber(1).smaller(WNumber(1.5))
    assert WNumber(2).smaller(WNumber(2), or_equal=True)
    assert not WNumber(2).smaller(WNumber(2))
    assert WString("abc").smaller(WString("abd"))
    assert WList((WNumber(1),)).smaller(WList((WNumber(1), WNumber(0))))
    assert WList((WNumber(2),)).greater(WList((WNumber(1), WNumber(5))))


def test_greater_is_derived_from_smaller() -> None:
    assert WNumber(3).greater(WNumber(2))
    assert not WNumber(2).greater(WNumber(2))
    assert WNumber(2).greater(WNumber(2), or_equal=True)


def test_unordered_values_raise_with_the_requested_operator() -> None:
    with pytest.raises(OrderingError, match="'<' not supported between types 'int' and 'string'"):
        WNumber(1).smaller(WString("a"))

    with pytest.raises(OrderingError) as excinfo:
        TRUE.greater(FALSE, or_equal=True)
    assert excinfo.value.operator == ">="
    assert excinfo.value.left is TRUE
    assert excinfo.value.right is FALSE


def test_list_ordering_fails_on_unordered_elements() -> None:
    with pytest.raises(OrderingError):
        WList((WNumber(1),)).smaller(WList((WString("a"),)))


def test_list_contains_uses_value_equality() -> None:
    values = WList((WNumber(1), WString("x")))
    assert values.contains(WNumber(1.0))
    assert values.contains(WString("x"))
    assert not values.contains(WString("1"))


def test_display() -> None:
    assert str(NULL) == "null"
    assert str(TRUE) == "true"
    assert str(WNumber(3)) == "3"
    assert str(WNumber(2.5)) == "2.5"
    assert str(WString("hi")) == "'hi'"
    assert str(WList((WNumber(1), WString("x")))) == "[1, 'x']"
    assert str(WMap({"a": WNumber(1)})) == "{a: 1}"


def test_python_conversion() -> None:
    data = {"name": "went", "tags": [1, 2.5, None, True], "nested": {"ok": False}}
    value = from_python(data)
    assert isinstance(value, WMap)
    assert value.entries["tags"] == WList((WNumber(1), WNumber(2.5), NULL, TRUE))
    assert to_python(value) == data


def test_from_python_wraps_large_ints_and_rejects_unknown_types() -> None:
    assert from_python(INT64_MAX + 1) == WNumber(INT64_MIN)
    with pytest.raises(TypeError, match="cannot convert"):
        from_python(object())


def test_map_scope_resolves_through_parents() -> None:
    parent = MapScope(values={"x": 1})
    child = parent.child()
    child.define("y", WString("local"))

    assert isinstance(child, Scope)
    assert child.parent is parent
    assert child.resolve("x") == WNumber(1)
    assert child.resolve("y") == WString("local")
    assert parent.resolve("y") is None
    assert "x" in child
    assert "z" not in child


def test_child_definitions_shadow_parent() -> None:
    parent = MapScope(values={"x": 1})
    child = MapScope(parent=parent, values={"x": "shadow"})
    assert child.resolve("x") == WString("shadow")
    assert parent.resolve("x") == WNumber(1)
