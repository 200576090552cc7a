"""Assertions on calendar dates and timestamps."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, ClassVar, TypeVar

from verbytes.exceptions import InvalidUsage
from verbytes.execution import begin
from verbytes.primitives.base import Assertions

__tracebackhide__ = True

D = TypeVar("D", bound=date)


class _TemporalAssertions(Assertions[D | None]):
    """Equality and ordering assertions shared by dates and datetimes.

    A ``None`` subject is never before, after, or within any range.
    Ordering arguments of the wrong kind raise ``InvalidUsage`` before
    anything is compared.
    """

    kind: ClassVar[str]

    def __init__(self, subject: D | None):
        if subject is not None:
            self._check_kind(subject, "subject")
        super().__init__(subject)

    def be(self, expected: D, because: str = "", *because_args: Any) -> _TemporalAssertions[D]:
        return (
            begin(self._subject == expected, self)
            .with_message(
                f"Expected {self.kind} to be {{0}}{{1}}, but found {{2}}.",
                expected,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be(self, unexpected: D, because: str = "", *because_args: Any) -> _TemporalAssertions[D]:
        return (
            begin(self._subject != unexpected, self)
            .with_message(
                f"Did not expect {self.kind} to be {{0}}{{1}}, but it was.",
                unexpected,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def be_before(self, expected: D, because: str = "", *because_args: Any) -> _TemporalAssertions[D]:
        self._check_comparable(expected, "expected")
        return (
            begin(self._subject is not None and self._subject < expected, self)
            .with_message(
                f"Expected {self.kind} to be before {{0}}{{1}}, but found {{2}}.",
                expected,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def be_after(self, expected: D, because: str = "", *because_args: Any) -> _TemporalAssertions[D]:
        self._check_comparable(expected, "expected")
        return (
            begin(self._subject is not None and self._subject > expected, self)
            .with_message(
                f"Expected {self.kind} to be after {{0}}{{1}}, but found {{2}}.",
                expected,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def be_in_range(self, start: D, end: D, because: str = "", *because_args: Any) -> _TemporalAssertions[D]:
        """Assert ``start <= subject <= end``; both ends are inclusive."""
        self._check_comparable(start, "start")
        self._check_comparable(end, "end")
        return (
            begin(self._subject is not None and start <= self._subject <= end, self)
            .with_message(
                f"Expected {self.kind} to be between {{0}} and {{1}}{{2}}, but found {{3}}.",
                start,
                end,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def _check_kind(self, value: Any, name: str) -> None:
        raise NotImplementedError

    def _check_comparable(self, value: Any, name: str) -> None:
        self._check_kind(value, name)


class DateOnlyAssertions(_TemporalAssertions[date]):
    """Assertions on a calendar date without time of day."""

    kind = "DateOnly"

    def _check_kind(self, value: Any, name: str) -> None:
        if isinstance(value, datetime) or not isinstance(value, date):
            raise InvalidUsage(
                f"DateOnly assertions take a date for '{name}', got {type(value).__name__}; "
                "use should_datetime for a datetime."
            )


class DateTimeAssertions(_TemporalAssertions[datetime]):
    """Assertions on a datetime. Naive and aware values are never compared."""

    kind = "DateTime"

    def _check_kind(self, value: Any, name: str) -> None:
        if not isinstance(value, datetime):
            raise InvalidUsage(
                f"DateTime assertions take a datetime for '{name}', got {type(value).__name__}; "
                "use should_date for a date."
            )

    def _check_comparable(self, value: Any, name: str) -> None:
        self._check_kind(value, name)
        if self._subject is not None and _is_aware(value) != _is_aware(self._subject):
            raise InvalidUsage(
                f"Cannot compare a {_awareness(self._subject)} subject "
                f"with a {_awareness(value)} '{name}'."
            )


def _is_aware(value: datetime) -> bool:
    return value.utcoffset() is not None


def _awareness(value: datetime) -> str:
    return "timezone-aware" if _is_aware(value) else "naive"
