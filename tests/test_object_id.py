"""Tests for BSON ObjectId assertions."""

import pytest
from bson import ObjectId

from verbytes import AssertionFailure, should_object_id

OID = ObjectId("5f43a1b2c3d4e5f60718293a")
EMPTY = ObjectId("0" * 24)


def _message(call) -> str:
    with pytest.raises(AssertionFailure) as exc_info:
        call()
    return exc_info.value.message


def test_be_empty():
    should_object_id(EMPTY).be_empty()
    assert _message(lambda: should_object_id(OID).be_empty()) == (
        "Expected ObjectId to be empty, but found '5f43a1b2c3d4e5f60718293a'."
    )


def test_not_be_empty():
    should_object_id(ObjectId()).not_be_empty()
    assert _message(lambda: should_object_id(EMPTY).not_be_empty()) == (
        "Expected ObjectId not to be empty, but it was."
    )


def test_be_equal_to():
    should_object_id(OID).be_equal_to(ObjectId(str(OID)))
    assert _message(lambda: should_object_id(OID).be_equal_to(EMPTY)) == (
        "Expected ObjectId to be '000000000000000000000000', but found '5f43a1b2c3d4e5f60718293a'."
    )


def test_not_be_equal_to():
    should_object_id(OID).not_be_equal_to(EMPTY)
    assert _message(
        lambda: should_object_id(OID).not_be_equal_to(OID, "{0} must be regenerated", "the id")
    ) == (
        "Expected ObjectId not to be '5f43a1b2c3d4e5f60718293a'"
        " because the id must be regenerated, but it was."
    )
