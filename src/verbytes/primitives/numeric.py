"""Assertions on integer values."""

from __future__ import annotations

from typing import Any

from verbytes.execution import begin
from verbytes.primitives.base import Assertions

__tracebackhide__ = True


class NumericAssertions(Assertions[int]):
    def be_greater_than(self, value: int, because: str = "", *because_args: Any) -> NumericAssertions:
        return (
            begin(self._subject > value, self)
            .with_message(
                "Expected {0} to be greater than {1}{2}, but it was not.",
                self._subject,
                value,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def be_less_than(self, value: int, because: str = "", *because_args: Any) -> NumericAssertions:
        return (
            begin(self._subject < value, self)
            .with_message(
                "Expected {0} to be less than {1}{2}, but it was not.",
                self._subject,
                value,
                self._reason(because, because_args),
            )
            .resolve()
        )
