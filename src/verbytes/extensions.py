"""Entry points: one ``should_*`` factory per subject category.

Each call wraps the subject in a fresh entity::

    should_string(name).start_with("Dr. ").end_with("PhD")
    should_collection(ids).have_count(3, "we inserted {0} rows", 3)
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Iterable, TypeVar
from uuid import UUID

from bson import ObjectId

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

T = TypeVar("T")


def should_boolean(subject: bool | None) -> BooleanAssertions:
    return BooleanAssertions(subject)


def should_string(subject: str | None) -> StringAssertions:
    return StringAssertions(subject)


def should_numeric(subject: int) -> NumericAssertions:
    return NumericAssertions(subject)


def should_enum(subject: Any, enum_type: type[Enum] | None = None) -> EnumAssertions:
    """Wrap an enum member, or a raw value/``None`` together with its ``enum_type``."""
    return EnumAssertions(subject, enum_type)


def should_date(subject: date | None) -> DateOnlyAssertions:
    return DateOnlyAssertions(subject)


def should_datetime(subject: datetime | None) -> DateTimeAssertions:
    return DateTimeAssertions(subject)


def should_guid(subject: UUID) -> GuidAssertions:
    return GuidAssertions(subject)


def should_object_id(subject: ObjectId) -> ObjectIdAssertions:
    return ObjectIdAssertions(subject)


def should_nullable(subject: Any) -> NullableAssertions:
    return NullableAssertions(subject)


def should_collection(subject: Iterable[T]) -> GenericCollectionAssertions[T]:
    return GenericCollectionAssertions(subject)


def should_object(subject: Any) -> ObjectAssertions:
    return ObjectAssertions(subject)


def should_throw(action: Callable[[], object]) -> ExceptionAssertions:
    """Wrap a zero-argument callable for ``.throw(SomeError)``."""
    return ExceptionAssertions(action)
