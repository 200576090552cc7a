"""Tests for integer assertions."""

import pytest

from verbytes import AssertionFailure, should_numeric


def test_be_greater_than():
    assertions = should_numeric(5)
    assert assertions.be_greater_than(4) is assertions


def test_be_greater_than_is_strict():
    with pytest.raises(AssertionFailure) as exc_info:
        should_numeric(5).be_greater_than(5)
    assert exc_info.value.message == "Expected 5 to be greater than 5, but it was not."


def test_be_less_than():
    should_numeric(-1).be_less_than(0)


def test_be_less_than_fail_with_reason():
    with pytest.raises(AssertionFailure) as exc_info:
        should_numeric(7).be_less_than(3, "only {0} slots exist", 3)
    assert exc_info.value.message == (
        "Expected 7 to be less than 3 because only 3 slots exist, but it was not."
    )


def test_range_by_chaining():
    should_numeric(10).be_greater_than(1).be_less_than(11)


def test_non_string_reason_is_rendered_as_text():
    with pytest.raises(AssertionFailure) as exc_info:
        should_numeric(1).be_greater_than(2, 5)
    assert exc_info.value.message == "Expected 1 to be greater than 2 because 5, but it was not."
