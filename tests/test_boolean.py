"""Tests for boolean assertions."""

import pytest

from verbytes import AssertionFailure, should_boolean


def _message(call) -> str:
    with pytest.raises(AssertionFailure) as exc_info:
        call()
    return exc_info.value.message


# --- be ---


def test_be_pass():
    assertions = should_boolean(True)
    assert assertions.be(True) is assertions


def test_be_fail():
    assert _message(lambda: should_boolean(False).be(True)) == (
        "Expected boolean to be True, but found False."
    )


def test_be_fails_for_none():
    assert _message(lambda: should_boolean(None).be(False)) == (
        "Expected boolean to be False, but found null."
    )


# --- be_true / be_false ---


def test_be_true_and_be_false():
    should_boolean(True).be_true()
    should_boolean(False).be_false()


def test_be_true_fails_for_none():
    assert _message(lambda: should_boolean(None).be_true()) == (
        "Expected boolean to be True, but found null."
    )


def test_be_false_fail_with_reason():
    message = _message(
        lambda: should_boolean(True).be_false("the flag was cleared by {0}", "setup")
    )
    assert message == (
        "Expected boolean to be False because the flag was cleared by setup, but found True."
    )


# --- not_be ---


def test_not_be_pass():
    should_boolean(True).not_be(False)
    should_boolean(None).not_be(True)


def test_not_be_fail():
    assert _message(lambda: should_boolean(True).not_be(True)) == (
        "Did not expect boolean to be True, but it was."
    )


# --- imply ---


@pytest.mark.parametrize(
    "antecedent,consequent",
    [(True, True), (False, True), (False, False), (None, False)],
)
def test_imply_pass(antecedent, consequent):
    should_boolean(antecedent).imply(consequent)


def test_imply_fail():
    assert _message(lambda: should_boolean(True).imply(False)) == (
        "Expected True to imply False, but it did not."
    )


def test_chain():
    should_boolean(True).be_true().not_be(False).imply(True).be(True)
