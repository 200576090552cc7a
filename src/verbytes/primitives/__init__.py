"""Assertion entities, one per subject category."""

from verbytes.primitives.base import Assertions
from verbytes.primitives.boolean import BooleanAssertions
from verbytes.primitives.collection import GenericCollectionAssertions
from verbytes.primitives.dates import DateOnlyAssertions, DateTimeAssertions
from verbytes.primitives.enumeration import EnumAssertions
from verbytes.primitives.exception import ExceptionAssertions
from verbytes.primitives.guid import GuidAssertions
from verbytes.primitives.nullable import NullableAssertions
from verbytes.primitives.numeric import NumericAssertions
from verbytes.primitives.object_id import ObjectIdAssertions
from verbytes.primitives.objects import ObjectAssertions
from verbytes.primitives.string import StringAssertions

__all__ = [
    "Assertions",
    "BooleanAssertions",
    "DateOnlyAssertions",
    "DateTimeAssertions",
    "EnumAssertions",
    "ExceptionAssertions",
    "GenericCollectionAssertions",
    "GuidAssertions",
    "NullableAssertions",
    "NumericAssertions",
    "ObjectAssertions",
    "ObjectIdAssertions",
    "StringAssertions",
]
