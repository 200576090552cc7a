"""Execution protocol turning a predicate result into pass or failure.

A chain is built per call::

    begin(condition, self).with_message(template, *args).resolve()

Each stage is an immutable value owned by the call that created it, so
independent chains never share a condition or message. The message is
only formatted when the condition is false.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from verbytes.exceptions import AssertionFailure
from verbytes.formatting import format_value

# pytest: hide these frames from tracebacks
__tracebackhide__ = True

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ResultStage(Generic[T]):
    """Final stage: holds the condition and, when it failed, the message."""

    holds: bool
    continuation: T
    message: str | None = None

    def resolve(self) -> T:
        """Return the continuation, or raise ``AssertionFailure`` if the condition failed."""
        if self.holds:
            return self.continuation
        message = self.message if self.message is not None else "Assertion failed."
        logger.debug(f"Assertion failed: {message}")
        raise AssertionFailure(message)


@dataclass(frozen=True)
class ConditionStage(Generic[T]):
    holds: bool
    continuation: T

    def with_message(self, template: str, *args: Any) -> ResultStage[T]:
        """Attach a ``{0}``-style message template, formatted only on failure.

        Arguments are rendered with :func:`format_value`.
        """
        if self.holds:
            return ResultStage(True, self.continuation)
        message = template.format(*[format_value(arg) for arg in args])
        return ResultStage(False, self.continuation, message)


def begin(condition: bool, continuation: T) -> ConditionStage[T]:
    """Start a chain for ``condition``; ``continuation`` is returned when it holds."""
    return ConditionStage(bool(condition), continuation)
