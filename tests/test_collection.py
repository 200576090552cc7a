"""Tests for collection assertions."""

import pytest

from verbytes import AssertionFailure, InvalidUsage, should_collection


def _message(call) -> str:
    with pytest.raises(AssertionFailure) as exc_info:
        call()
    return exc_info.value.message


# --- construction ---


def test_none_subject_rejected():
    with pytest.raises(InvalidUsage, match="Collection cannot be None"):
        should_collection(None)


def test_generator_subject_read_once():
    assertions = should_collection(x * 2 for x in range(3))
    assertions.have_count(3).contain(4).be_equivalent_to([0, 2, 4])


# --- contain / not_contain ---


def test_contain():
    should_collection(["a", "b"]).contain("b")
    assert _message(lambda: should_collection(["a", "b"]).contain("c")) == (
        "Expected collection to contain c, but it did not."
    )


def test_not_contain():
    should_collection([1, 2]).not_contain(3)
    assert _message(lambda: should_collection([1, 2]).not_contain(2)) == (
        "Did not expect collection to contain 2, but it did."
    )


# --- be_empty / not_be_empty / have_count ---


def test_be_empty():
    should_collection([]).be_empty()
    assert _message(lambda: should_collection([1, 2]).be_empty()) == (
        "Expected collection to be empty, but it contained 2 items."
    )


def test_not_be_empty():
    should_collection({1}).not_be_empty()
    assert _message(lambda: should_collection(()).not_be_empty()) == (
        "Expected collection to not be empty, but it was."
    )


def test_have_count():
    should_collection("abc").have_count(3)
    assert _message(lambda: should_collection([1, 2, 3]).have_count(5)) == (
        "Expected collection to have 5 items, but found 3."
    )


# --- contain_all ---


def test_contain_all_ignores_order():
    should_collection([1, 2, 3]).contain_all([3, 1])


def test_contain_all_reports_first_missing():
    assert _message(lambda: should_collection([1, 2, 3]).contain_all([1, 4, 5])) == (
        "Expected collection to contain 4, but it did not."
    )


def test_contain_all_empty_passes():
    should_collection([]).contain_all([])


def test_contain_all_rejects_none():
    with pytest.raises(InvalidUsage):
        should_collection([1]).contain_all(None)


# --- be_equivalent_to ---


def test_be_equivalent_to_same_order():
    should_collection([1, 2, 3]).be_equivalent_to([1, 2, 3])
    should_collection([1, 2, 3]).be_equivalent_to((1, 2, 3))


def test_be_equivalent_to_order_matters():
    assert _message(lambda: should_collection([1, 2, 3]).be_equivalent_to([3, 2, 1])) == (
        "Expected collection to be equivalent to [3, 2, 1], but found [1, 2, 3]."
    )


def test_be_equivalent_to_length_matters():
    with pytest.raises(AssertionFailure):
        should_collection([1, 2]).be_equivalent_to([1, 2, 2])


def test_be_equivalent_to_rejects_none():
    with pytest.raises(InvalidUsage):
        should_collection([1]).be_equivalent_to(None)


def test_chain_with_reason():
    assertions = should_collection(["x"])
    assert assertions.not_be_empty().have_count(1, "one row was inserted") is assertions
    assert _message(
        lambda: assertions.have_count(2, "we inserted {0} rows", 2)
    ) == "Expected collection to have 2 items because we inserted 2 rows, but found 1."
