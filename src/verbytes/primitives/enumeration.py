"""Assertions on enumeration values, including bit-flag enums."""

from __future__ import annotations

import operator
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Iterable

from verbytes.exceptions import InvalidUsage
from verbytes.execution import begin
from verbytes.formatting import Items
from verbytes.primitives.base import Assertions

__tracebackhide__ = True


class EnumAssertions(Assertions[Any]):
    """Assertions on an enum member, a raw underlying value, or ``None``.

    Args:
        subject: The value under test.
        enum_type: The enum class the subject belongs to. Defaults to
            ``type(subject)``; required when the subject is not a member,
            e.g. a raw value or ``None``.
    """

    def __init__(self, subject: Any, enum_type: type[Enum] | None = None):
        if enum_type is None:
            if not isinstance(subject, Enum):
                raise InvalidUsage(
                    "enum_type is required when the subject is not an enum member."
                )
            enum_type = type(subject)
        elif not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
            raise InvalidUsage(f"{enum_type!r} is not an Enum type.")
        super().__init__(subject)
        self._enum_type = enum_type

    @property
    def enum_type(self) -> type[Enum]:
        return self._enum_type

    def be(self, expected: Any, because: str = "", *because_args: Any) -> EnumAssertions:
        return (
            begin(self._subject == expected, self)
            .with_message(
                "Expected enum to be {0}{1}, but found {2}.",
                expected,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be(self, unexpected: Any, because: str = "", *because_args: Any) -> EnumAssertions:
        return (
            begin(self._subject != unexpected, self)
            .with_message(
                "Did not expect enum to be {0}{1}, but it was.",
                unexpected,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def be_defined(self, because: str = "", *because_args: Any) -> EnumAssertions:
        """Assert that the subject's value is the value of a named member.

        Combined flags that have no name of their own are not defined.
        """
        return (
            begin(self._is_defined(), self)
            .with_message(
                "Expected enum to be defined in {0}{1}, but found {2}.",
                self._enum_type.__name__,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be_defined(self, because: str = "", *because_args: Any) -> EnumAssertions:
        return (
            begin(not self._is_defined(), self)
            .with_message(
                "Did not expect enum to be defined in {0}{1}, but it was.",
                self._enum_type.__name__,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def be_one_of(self, valid_values: Iterable[Any], because: str = "", *because_args: Any) -> EnumAssertions:
        """Assert membership in ``valid_values``. An empty set never matches."""
        if valid_values is None:
            raise InvalidUsage("Valid values cannot be None.")
        values = list(valid_values)
        return (
            begin(self._subject in values, self)
            .with_message(
                "Expected enum to be one of {0}{1}, but found {2}.",
                Items(values),
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def have_flag(self, expected_flag: Any, because: str = "", *because_args: Any) -> EnumAssertions:
        return (
            begin(self._subject is not None and self._has_flag(expected_flag), self)
            .with_message(
                "Expected enum to have flag {0}{1}, but found {2}.",
                expected_flag,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_have_flag(self, unexpected_flag: Any, because: str = "", *because_args: Any) -> EnumAssertions:
        return (
            begin(self._subject is None or not self._has_flag(unexpected_flag), self)
            .with_message(
                "Did not expect enum to have flag {0}{1}, but it did.",
                unexpected_flag,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def match(self, predicate: Callable[[Any], bool], because: str = "", *because_args: Any) -> EnumAssertions:
        """Assert that ``predicate(subject)`` is truthy. ``None`` subjects are passed through."""
        if predicate is None:
            raise InvalidUsage("Predicate cannot be None.")
        if not callable(predicate):
            raise InvalidUsage(f"Predicate {predicate!r} is not callable.")
        return (
            begin(predicate(self._subject), self)
            .with_message(
                "Expected enum to match the given condition{0}, but it did not.",
                self._reason(because, because_args),
            )
            .resolve()
        )

    def have_value(self, expected: Any, because: str = "", *because_args: Any) -> EnumAssertions:
        """Assert that the underlying value equals ``expected`` as a decimal number."""
        expected_value = _to_decimal(expected)
        return (
            begin(self._subject is not None and self._decimal_value() == expected_value, self)
            .with_message(
                "Expected enum to have value {0}{1}, but found {2}.",
                expected,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_have_value(self, unexpected: Any, because: str = "", *because_args: Any) -> EnumAssertions:
        unexpected_value = _to_decimal(unexpected)
        return (
            begin(self._subject is None or self._decimal_value() != unexpected_value, self)
            .with_message(
                "Expected enum to not have value {0}{1}, but it did.",
                unexpected,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def _is_defined(self) -> bool:
        if self._subject is None:
            return False
        value = _raw(self._subject)
        return any(member.value == value for member in self._enum_type.__members__.values())

    def _has_flag(self, flag: Any) -> bool:
        bits = _bits(flag)
        return _bits(self._subject) & bits == bits

    def _decimal_value(self) -> Decimal:
        return _to_decimal(_raw(self._subject))


def _raw(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _bits(value: Any) -> int:
    try:
        return operator.index(_raw(value))
    except TypeError as exc:
        raise InvalidUsage(f"{value!r} has no integer flag representation.") from exc


def _to_decimal(value: Any) -> Decimal:
    value = _raw(value)
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value)
    except (TypeError, ValueError, InvalidOperation) as exc:
        raise InvalidUsage(f"{value!r} has no decimal representation.") from exc
