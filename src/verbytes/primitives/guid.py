"""Assertions on ``uuid.UUID`` values."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from verbytes.execution import begin
from verbytes.primitives.base import Assertions

__tracebackhide__ = True

EMPTY = UUID(int=0)


class GuidAssertions(Assertions[UUID]):
    def be(self, expected: UUID | str, because: str = "", *because_args: Any) -> GuidAssertions:
        """Assert equality with a UUID, or with its canonical string form when given a ``str``."""
        if isinstance(expected, str):
            return (
                begin(str(self._subject) == expected, self)
                .with_message(
                    'Expected GUID string representation to be "{0}"{1}, but found "{2}".',
                    expected,
                    self._reason(because, because_args),
                    self._subject,
                )
                .resolve()
            )
        return (
            begin(self._subject == expected, self)
            .with_message(
                "Expected GUID to be {0}{1}, but found {2}.",
                expected,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be(self, unexpected: UUID, because: str = "", *because_args: Any) -> GuidAssertions:
        return (
            begin(self._subject != unexpected, self)
            .with_message(
                "Did not expect GUID to be {0}{1}, but it was.",
                unexpected,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def be_empty(self, because: str = "", *because_args: Any) -> GuidAssertions:
        return (
            begin(self._subject == EMPTY, self)
            .with_message(
                "Expected GUID to be empty (Guid.Empty){0}, but found '{1}'.",
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be_empty(self, because: str = "", *because_args: Any) -> GuidAssertions:
        return (
            begin(self._subject != EMPTY, self)
            .with_message(
                "Expected GUID to not be empty (Guid.Empty){0}, but it was.",
                self._reason(because, because_args),
            )
            .resolve()
        )
