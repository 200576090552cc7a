"""Assertions on BSON ``ObjectId`` values."""

from __future__ import annotations

from typing import Any

from bson import ObjectId

from verbytes.execution import begin
from verbytes.primitives.base import Assertions

__tracebackhide__ = True

EMPTY = ObjectId(b"\x00" * 12)


class ObjectIdAssertions(Assertions[ObjectId]):
    def be_empty(self, because: str = "", *because_args: Any) -> ObjectIdAssertions:
        return (
            begin(self._subject == EMPTY, self)
            .with_message(
                "Expected ObjectId to be empty{0}, but found '{1}'.",
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be_empty(self, because: str = "", *because_args: Any) -> ObjectIdAssertions:
        return (
            begin(self._subject != EMPTY, self)
            .with_message(
                "Expected ObjectId not to be empty{0}, but it was.",
                self._reason(because, because_args),
            )
            .resolve()
        )

    def be_equal_to(self, expected: ObjectId, because: str = "", *because_args: Any) -> ObjectIdAssertions:
        return (
            begin(self._subject == expected, self)
            .with_message(
                "Expected ObjectId to be '{0}'{1}, but found '{2}'.",
                expected,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be_equal_to(self, unexpected: ObjectId, because: str = "", *because_args: Any) -> ObjectIdAssertions:
        return (
            begin(self._subject != unexpected, self)
            .with_message(
                "Expected ObjectId not to be '{0}'{1}, but it was.",
                unexpected,
                self._reason(because, because_args),
            )
            .resolve()
        )
