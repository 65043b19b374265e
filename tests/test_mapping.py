"""Tests for mapping expectations."""

import pytest

from expectator import ExpectationFailedError, MapExpectation, NoExpectatorsError

NAME = "Map expectation"
EXPECTED = {"one": 1, "two": 2, "three": 3}


@pytest.fixture
def expectation():
    return MapExpectation(NAME, EXPECTED)


def test_constructors():
    MapExpectation(NAME, EXPECTED).expect_equals(dict(EXPECTED)).confirm()
    with pytest.raises(NoExpectatorsError):
        MapExpectation(NAME).confirm()


@pytest.mark.parametrize(
    "build",
    [
        lambda e: e.expect_keys_contain("one"),
        lambda e: e.expect_values_contain(2),
        lambda e: e.expect_keys_do_not_contain("four"),
        lambda e: e.expect_values_do_not_contain(4),
        lambda e: e.expect_keys_contain_all(["one", "three"]),
        lambda e: e.expect_keys_contain_all({"one": 100, "two": 200}),
        lambda e: e.expect_values_contain_all([1, 3]),
        lambda e: e.expect_values_contain_all({"x": 1, "y": 2}),
        lambda e: e.expect_keys_do_not_contain_any(["four", "five"]),
        lambda e: e.expect_keys_do_not_contain_any({"four": 1}),
        lambda e: e.expect_values_do_not_contain_any([4, 5]),
        lambda e: e.expect_values_do_not_contain_any({"one": 4}),
        lambda e: e.expect_size(3),
    ],
)
def test_passing_expectations(expectation, build):
    build(expectation).confirm()


@pytest.mark.parametrize(
    "build",
    [
        lambda e: e.expect_keys_contain("four"),
        lambda e: e.expect_values_contain(4),
        lambda e: e.expect_keys_do_not_contain("one"),
        lambda e: e.expect_values_do_not_contain(1),
        lambda e: e.expect_keys_contain_all(["one", "four"]),
        lambda e: e.expect_keys_contain_all({"four": 1}),
        lambda e: e.expect_values_contain_all([1, 4]),
        lambda e: e.expect_values_contain_all({"one": 4}),
        lambda e: e.expect_keys_do_not_contain_any(["one"]),
        lambda e: e.expect_values_do_not_contain_any({"x": 3}),
        lambda e: e.expect_size(2),
        lambda e: e.expect_empty(),
    ],
)
def test_failing_expectations(expectation, build):
    with pytest.raises(ExpectationFailedError):
        build(expectation).confirm()


def test_empty_map():
    MapExpectation(NAME, {}).expect_empty().confirm()


def test_keys_contain_failure_message(expectation):
    with pytest.raises(ExpectationFailedError) as exc_info:
        expectation.expect_keys_contain("four").confirm()
    assert str(exc_info.value) == (
        f"{NAME}: expected {EXPECTED} to have keys which contain four"
    )


def test_values_contain_all_uses_mapping_values(expectation):
    with pytest.raises(ExpectationFailedError) as exc_info:
        expectation.expect_values_contain_all({"a": 1, "b": 9}).confirm()
    assert str(exc_info.value) == (
        f"{NAME}: expected {EXPECTED} values to contain all of [1, 9]"
    )


# --- unset expected value and unhashable keys ---


@pytest.mark.parametrize(
    "build",
    [
        lambda e: e.expect_keys_contain("one"),
        lambda e: e.expect_values_do_not_contain(1),
        lambda e: e.expect_keys_do_not_contain_any(["one"]),
        lambda e: e.expect_size(0),
    ],
)
def test_rules_fail_while_expected_is_unset(build):
    with pytest.raises(ExpectationFailedError):
        build(MapExpectation(NAME)).confirm()


def test_unhashable_key_is_not_contained(expectation):
    with pytest.raises(ExpectationFailedError):
        MapExpectation(NAME, {"a": 1}).expect_keys_contain(["a"]).confirm()

    expectation.expect_keys_do_not_contain(["one"]).expect_keys_do_not_contain_any(
        [["one"], {"two": 2}]
    ).confirm()
