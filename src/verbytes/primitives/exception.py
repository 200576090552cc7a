"""Assertions on code that is expected to raise."""

from __future__ import annotations

from typing import Any, Callable

from verbytes.exceptions import InvalidUsage
from verbytes.execution import begin
from verbytes.primitives.base import Assertions

__tracebackhide__ = True


class ExceptionAssertions(Assertions[Callable[[], object]]):
    """Assertions on a zero-argument callable.

    Raises:
        InvalidUsage: If ``action`` is not callable.
    """

    def __init__(self, action: Callable[[], object]):
        if not callable(action):
            raise InvalidUsage(f"Action {action!r} is not callable.")
        super().__init__(action)

    def throw(
        self, exception_type: type[Exception], because: str = "", *because_args
    ) -> ExceptionAssertions:
        """Invoke the action once and assert it raises ``exception_type`` (or a subclass).

        An exception of another type is chained as the failure's context.
        """
        if not (isinstance(exception_type, type) and issubclass(exception_type, Exception)):
            raise InvalidUsage(f"{exception_type!r} is not an Exception type.")

        try:
            self._subject()
        except exception_type:
            return self
        except Exception as exc:
            return (
                begin(False, self)
                .with_message(
                    "Expected exception of type {0}{1} but got {2}.",
                    exception_type.__name__,
                    self._reason(because, because_args),
                    type(exc).__name__,
                )
                .resolve()
            )

        return (
            begin(False, self)
            .with_message(
                "Expected exception of type {0}{1} but no exception was thrown.",
                exception_type.__name__,
                self._reason(because, because_args),
            )
            .resolve()
        )
