"""Type-checked equality assertions on arbitrary objects."""

from __future__ import annotations

import operator
from typing import Any, Callable

from verbytes.exceptions import InvalidUsage
from verbytes.execution import begin
from verbytes.primitives.base import Assertions

__tracebackhide__ = True

Comparer = Callable[[Any, Any], bool]


class ObjectAssertions(Assertions[Any]):
    def be(
        self,
        expected: Any,
        because: str = "",
        *because_args: Any,
        comparer: Comparer = operator.eq,
    ) -> ObjectAssertions:
        """Assert the subject is an instance of ``type(expected)`` and compares equal.

        Args:
            expected: The expected value.
            because: Optional reason template, formatted with ``because_args``.
            comparer: ``comparer(subject, expected)`` decides equality.
                Defaults to ``==``; passing ``None`` raises ``InvalidUsage``.
        """
        _require_comparer(comparer)
        return (
            begin(self._matches(expected, comparer), self)
            .with_message(
                "Expected object to be {0}{1}, but found {2}.",
                expected,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be(
        self,
        unexpected: Any,
        because: str = "",
        *because_args: Any,
        comparer: Comparer = operator.eq,
    ) -> ObjectAssertions:
        _require_comparer(comparer)
        return (
            begin(not self._matches(unexpected, comparer), self)
            .with_message(
                "Did not expect object to be {0}{1}, but it was.",
                unexpected,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def not_be_null(self, because: str = "", *because_args: Any) -> ObjectAssertions:
        return (
            begin(self._subject is not None, self)
            .with_message(
                "Expected object not to be null{0}, but it was.",
                self._reason(because, because_args),
            )
            .resolve()
        )

    def _matches(self, expected: Any, comparer: Comparer) -> bool:
        return isinstance(self._subject, type(expected)) and bool(comparer(self._subject, expected))


def _require_comparer(comparer: Comparer | None) -> None:
    if comparer is None:
        raise InvalidUsage("Comparer cannot be None.")
    if not callable(comparer):
        raise InvalidUsage(f"Comparer {comparer!r} is not callable.")
