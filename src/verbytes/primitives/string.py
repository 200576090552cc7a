"""Assertions on text values."""

from __future__ import annotations

import re
from typing import Any, Iterable

from verbytes.exceptions import InvalidUsage
from verbytes.execution import begin
from verbytes.formatting import Items
from verbytes.primitives.base import Assertions

__tracebackhide__ = True


class StringAssertions(Assertions[str | None]):
    """Assertions on a ``str`` or ``None`` subject.

    ``None`` is reported as ``null`` and fails every substring and regex
    check.
    """

    def be(self, expected: str | None, because: str = "", *because_args: Any) -> StringAssertions:
        """Assert exact equality, including casing and whitespace."""
        return (
            begin(self._subject == expected, self)
            .with_message(
                'Expected string to be "{0}"{1}, but found "{2}".',
                expected,
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be(self, unexpected: str | None, because: str = "", *because_args: Any) -> StringAssertions:
        return (
            begin(self._subject != unexpected, self)
            .with_message(
                'Did not expect string to be "{0}"{1}, but it was.',
                unexpected,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def be_one_of(self, valid_values: Iterable[str], because: str = "", *because_args: Any) -> StringAssertions:
        values = _require_values(valid_values)
        return (
            begin(self._subject in values, self)
            .with_message(
                'Expected string to be one of [{0}]{1}, but found "{2}".',
                Items(values),
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be_one_of(self, invalid_values: Iterable[str], because: str = "", *because_args: Any) -> StringAssertions:
        values = _require_values(invalid_values)
        return (
            begin(self._subject not in values, self)
            .with_message(
                'Did not expect string to be one of [{0}]{1}, but found "{2}".',
                Items(values),
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def contain(self, expected: str, because: str = "", *because_args: Any) -> StringAssertions:
        _require_text(expected, "expected")
        return (
            begin(self._subject is not None and expected in self._subject, self)
            .with_message(
                'Expected string "{0}" to contain "{1}"{2}, but it did not.',
                self._subject,
                expected,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def start_with(self, expected: str, because: str = "", *because_args: Any) -> StringAssertions:
        _require_text(expected, "expected")
        return (
            begin(self._subject is not None and self._subject.startswith(expected), self)
            .with_message(
                'Expected string "{0}" to start with "{1}"{2}, but it did not.',
                self._subject,
                expected,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def end_with(self, expected: str, because: str = "", *because_args: Any) -> StringAssertions:
        _require_text(expected, "expected")
        return (
            begin(self._subject is not None and self._subject.endswith(expected), self)
            .with_message(
                'Expected string "{0}" to end with "{1}"{2}, but it did not.',
                self._subject,
                expected,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def match_regex(self, pattern: str, because: str = "", *because_args: Any) -> StringAssertions:
        """Assert that ``pattern`` matches somewhere in the subject (not anchored)."""
        if not pattern:
            raise InvalidUsage("Regex pattern cannot be null or empty.")
        try:
            regex = re.compile(pattern)
        except re.error as exc:
            raise InvalidUsage(f"Invalid regex pattern {pattern!r}: {exc}") from exc

        return (
            begin(self._subject is not None and regex.search(self._subject) is not None, self)
            .with_message(
                'Expected string "{0}" to match regex "{1}"{2}, but it did not.',
                self._subject,
                pattern,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def be_null_or_empty(self, because: str = "", *because_args: Any) -> StringAssertions:
        return (
            begin(not self._subject, self)
            .with_message(
                'Expected string to be null or empty{0}, but found "{1}".',
                self._reason(because, because_args),
                self._subject,
            )
            .resolve()
        )

    def not_be_null_or_empty(self, because: str = "", *because_args: Any) -> StringAssertions:
        return (
            begin(bool(self._subject), self)
            .with_message(
                "Expected string not to be null or empty{0}, but it was.",
                self._reason(because, because_args),
            )
            .resolve()
        )


def _require_values(values: Iterable[str] | None) -> list[str]:
    if values is None:
        raise InvalidUsage("Values to compare against cannot be None.")
    return list(values)


def _require_text(value: str | None, name: str) -> None:
    if value is None:
        raise InvalidUsage(f"Argument '{name}' cannot be None.")
