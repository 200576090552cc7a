"""Fluent assertions for test code."""

import logging

from verbytes.exceptions import AssertionFailure, InvalidUsage
from verbytes.extensions import (
    should_boolean,
    should_collection,
    should_date,
    should_datetime,
    should_enum,
    should_guid,
    should_nullable,
    should_numeric,
    should_object,
    should_object_id,
    should_string,
    should_throw,
)
from verbytes.formatting import Reason
from verbytes.primitives import (
    BooleanAssertions,
    DateOnlyAssertions,
    DateTimeAssertions,
    EnumAssertions,
    ExceptionAssertions,
    GenericCollectionAssertions,
    GuidAssertions,
    NullableAssertions,
    NumericAssertions,
    ObjectAssertions,
    ObjectIdAssertions,
    StringAssertions,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AssertionFailure",
    "BooleanAssertions",
    "DateOnlyAssertions",
    "DateTimeAssertions",
    "EnumAssertions",
    "ExceptionAssertions",
    "GenericCollectionAssertions",
    "GuidAssertions",
    "InvalidUsage",
    "NullableAssertions",
    "NumericAssertions",
    "ObjectAssertions",
    "ObjectIdAssertions",
    "Reason",
    "StringAssertions",
    "should_boolean",
    "should_collection",
    "should_date",
    "should_datetime",
    "should_enum",
    "should_guid",
    "should_nullable",
    "should_numeric",
    "should_object",
    "should_object_id",
    "should_string",
    "should_throw",
]
