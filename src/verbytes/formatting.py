"""Rendering of values and reasons into failure messages."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Iterable


def format_value(value: Any) -> str:
    """Render a value the way failure messages show it.

    ``None`` renders as ``null``, enum members by name and dates in ISO 8601.
    A value whose ``__str__`` raises is shown by its default repr.
    """
    if value is None:
        return "null"
    if isinstance(value, Enum):
        if value.name is not None:
            return value.name
        return _flag_names(value)
    if isinstance(value, date):
        return value.isoformat()
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)


def _flag_names(value: Enum) -> str:
    """Name an unnamed flag combination as ``A|B`` in definition order."""
    bits = value.value
    if not isinstance(bits, int) or isinstance(bits, bool):
        return str(bits)
    names = [
        member.name
        for member in type(value).__members__.values()
        if isinstance(member.value, int)
        and member.value > 0
        and member.value & (member.value - 1) == 0
        and bits & member.value
    ]
    return "|".join(names) if names else str(bits)


def format_items(items: Iterable[Any]) -> str:
    return ", ".join(format_value(item) for item in items)


@dataclass(frozen=True)
class Reason:
    """A "because" template and its positional arguments.

    Rendering is deferred to ``__str__`` so a passing assertion never
    formats its reason.
    """

    template: str = ""
    args: tuple[Any, ...] = ()

    def __str__(self) -> str:
        if self.template is None:
            return ""
        template = str(self.template)
        try:
            text = template.format(*self.args)
        except Exception:
            # substitution errors fall back to the raw template
            text = template
        text = text.strip()
        if not text:
            return ""
        if text.startswith("because "):
            return f" {text}"
        return f" because {text}"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class Items:
    """Defers rendering a sequence of values until a message is built."""

    def __init__(self, items: Iterable[Any]):
        self._items = items

    def __str__(self) -> str:
        return format_items(self._items)
