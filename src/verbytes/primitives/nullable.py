"""Assertions on optional scalar values."""

from __future__ import annotations

from typing import Any

from verbytes.execution import begin
from verbytes.primitives.base import Assertions

__tracebackhide__ = True


class NullableAssertions(Assertions[Any]):
    """Assertions on a value that may be ``None``.

    ``be`` always fails on an absent subject and ``not_be`` always passes.
    """

    def have_value(self, because: str = "", *because_args: Any) -> NullableAssertions:
        return (
            begin(self._subject is not None, self)
            .with_message(
                "Expected nullable to have a value{0}, but it was null.",
                self._reason(because, because_args),
            )
            .resolve()
        )

    def not_have_value(self, because: str = "", *because_args: Any) -> NullableAssertions:
        return (
            begin(self._subject is None, self)
            .with_message(
                "Expected nullable to be null{0}, but it had a value.",
                self._reason(because, because_args),
            )
            .resolve()
        )

    def be(self, expected: Any, because: str = "", *because_args: Any) -> NullableAssertions:
        return (
            begin(self._subject is not None and self._subject == expected, self)
            .with_message(
                "Expected nullable to be {0}{1}, but found {2}.",
                expected,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be(self, unexpected: Any, because: str = "", *because_args: Any) -> NullableAssertions:
        return (
            begin(self._subject is None or self._subject != unexpected, self)
            .with_message(
                "Did not expect nullable to be {0}{1}, but it was.",
                unexpected,
                self._reason(because, because_args),
            )
            .resolve()
        )
