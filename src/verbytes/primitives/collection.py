"""Assertions on ordered collections."""

from __future__ import annotations

from typing import Any, Iterable, TypeVar

from verbytes.exceptions import InvalidUsage
from verbytes.execution import begin
from verbytes.formatting import Items
from verbytes.primitives.base import Assertions

__tracebackhide__ = True

T = TypeVar("T")

_MISSING = object()


class GenericCollectionAssertions(Assertions[tuple[T, ...]]):
    """Assertions on a finite iterable.

    The iterable is read once, at construction, into a tuple so generators
    can be asserted on more than once.

    Raises:
        InvalidUsage: If ``subject`` is None.
    """

    def __init__(self, subject: Iterable[T]):
        if subject is None:
            raise InvalidUsage("Collection cannot be None.")
        super().__init__(tuple(subject))

    def contain(self, item: T, because: str = "", *because_args: Any) -> GenericCollectionAssertions[T]:
        return (
            begin(item in self._subject, self)
            .with_message(
                "Expected collection to contain {0}{1}, but it did not.",
                item,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def not_contain(self, item: T, because: str = "", *because_args: Any) -> GenericCollectionAssertions[T]:
        return (
            begin(item not in self._subject, self)
            .with_message(
                "Did not expect collection to contain {0}{1}, but it did.",
                item,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def be_empty(self, because: str = "", *because_args: Any) -> GenericCollectionAssertions[T]:
        return (
            begin(len(self._subject) == 0, self)
            .with_message(
                "Expected collection to be empty{0}, but it contained {1} items.",
                self._reason(because, because_args),
                len(self._subject),
            )
            .resolve()
        )

    def not_be_empty(self, because: str = "", *because_args: Any) -> GenericCollectionAssertions[T]:
        return (
            begin(len(self._subject) > 0, self)
            .with_message(
                "Expected collection to not be empty{0}, but it was.",
                self._reason(because, because_args),
            )
            .resolve()
        )

    def have_count(self, expected_count: int, because: str = "", *because_args: Any) -> GenericCollectionAssertions[T]:
        return (
            begin(len(self._subject) == expected_count, self)
            .with_message(
                "Expected collection to have {0} items{1}, but found {2}.",
                expected_count,
                self._reason(because, because_args),
                len(self._subject),
            )
            .resolve()
        )

    def contain_all(self, expected_items: Iterable[T], because: str = "", *because_args: Any) -> GenericCollectionAssertions[T]:
        """Assert every item in ``expected_items`` is present, in any order.

        The failure message names the first missing item.
        """
        if expected_items is None:
            raise InvalidUsage("Expected items cannot be None.")
        missing = next((item for item in expected_items if item not in self._subject), _MISSING)
        return (
            begin(missing is _MISSING, self)
            .with_message(
                "Expected collection to contain {0}{1}, but it did not.",
                missing,
                self._reason(because, because_args),
            )
            .resolve()
        )

    def be_equivalent_to(self, expected_items: Iterable[T], because: str = "", *because_args: Any) -> GenericCollectionAssertions[T]:
        """Assert the same items in the same order (sequence equality)."""
        if expected_items is None:
            raise InvalidUsage("Expected items cannot be None.")
        expected: tuple[Any, ...] = tuple(expected_items)
        return (
            begin(self._subject == expected, self)
            .with_message(
                "Expected collection to be equivalent to [{0}]{1}, but found [{2}].",
                Items(expected),
                self._reason(because, because_args),
                Items(self._subject),
            )
            .resolve()
        )
