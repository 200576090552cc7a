"""Assertions on boolean values."""

from __future__ import annotations

from typing import Any

from verbytes.execution import begin
from verbytes.primitives.base import Assertions

__tracebackhide__ = True


class BooleanAssertions(Assertions[bool | None]):
    """Assertions on a ``bool`` or ``None`` subject."""

    def be(self, expected: bool, because: str = "", *because_args: Any) -> BooleanAssertions:
        return (
            begin(self._subject is not None and self._subject == expected, self)
            .with_message(
                "Expected boolean to be {0}{1}, but found {2}.",
                expected,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def be_true(self, because: str = "", *because_args: Any) -> BooleanAssertions:
        return (
            begin(self._subject is True, self)
            .with_message(
                "Expected boolean to be True{0}, but found {1}.",
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def be_false(self, because: str = "", *because_args: Any) -> BooleanAssertions:
        return (
            begin(self._subject is False, self)
            .with_message(
                "Expected boolean to be False{0}, but found {1}.",
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be(self, unexpected: bool, because: str = "", *because_args: Any) -> BooleanAssertions:
        return (
            begin(self._subject is None or self._subject != unexpected, self)
            .with_message(
                "Did not expect boolean to be {0}{1}, but it was.",
                unexpected,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def imply(self, consequent: bool, because: str = "", *because_args: Any) -> BooleanAssertions:
        """Assert material implication: fails only when the subject is True and ``consequent`` is False."""
        return (
            begin(not (self._subject is True and not consequent), self)
            .with_message(
                "Expected {0} to imply {1}{2}, but it did not.",
                self._subject,
                consequent,
                self._reason(because, because_args),
            )
            .resolve()
        )
