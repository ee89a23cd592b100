"""Tests for resolved value handling."""

import pytest
from types import SimpleNamespace
from penknife.lib.parser.values import as_pairs, element_get, is_truthy, to_display


@pytest.mark.parametrize(
    "value,expected",
    [
        ("", False),
        (0, False),
        (0.0, False),
        ([], False),
        ({}, False),
        (None, False),
        (False, False),
        ("0", True),
        ("text", True),
        (1, True),
        ([0], True),
        ({"a": None}, True),
        (True, True),
    ],
)
def test_is_truthy(value, expected):
    assert is_truthy(value) is expected


@pytest.mark.parametrize(
    "value,expected",
    [(None, ""), (True, "1"), (False, ""), (0, "0"), (1.5, "1.5"), ("s", "s")],
)
def test_to_display(value, expected):
    assert to_display(value) == expected


def test_as_pairs_mapping_keeps_order_and_keys():
    assert as_pairs({"first": "one", "second": "two"}) == [
        ("first", "one"),
        ("second", "two"),
    ]


def test_as_pairs_sequences_and_iterables():
    assert as_pairs(["one", "two"]) == [(0, "one"), (1, "two")]
    assert as_pairs(x * 2 for x in (1, 2)) == [(0, 2), (1, 4)]
    assert as_pairs([]) == []


@pytest.mark.parametrize("value", ["abc", b"abc", 5, None, 1.0, True])
def test_as_pairs_rejects_non_iterables(value):
    assert as_pairs(value) is None


def test_element_get():
    assert element_get({"x": 1}, "x") == 1
    assert element_get({0: "zero"}, "0") == "zero"
    assert element_get(["a", "b"], "1") == "b"
    assert element_get(SimpleNamespace(name="n"), "name") == "n"
    assert element_get("text", "0", default="d") == "d"
    assert element_get(["a"], "5", default=None) is None


def test_element_get_missing_raises_without_default():
    with pytest.raises(LookupError):
        element_get({"x": 1}, "y")
