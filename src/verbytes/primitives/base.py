"""Base class shared by the assertion entities."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from verbytes.formatting import Reason

T = TypeVar("T")


class Assertions(Generic[T]):
    """Wraps a single subject for one assertion chain.

    Attributes:
        subject: The value under test. Never mutated by the assertions.
    """

    def __init__(self, subject: T):
        self._subject = subject

    @property
    def subject(self) -> T:
        return self._subject

    @staticmethod
    def _reason(because: str, because_args: tuple[Any, ...]) -> Reason:
        return Reason(because or "", tuple(because_args))
