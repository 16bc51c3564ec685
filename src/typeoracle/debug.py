"""Diagnostic rendering of type values."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typeoracle.capabilities import TypeValue

ABSENT = "[None]"


def debug_string_of(value: TypeValue | None) -> str:
    """Render *value* with its concrete class so look-alike types can be told apart."""
    if value is None:
        return ABSENT
    cls = type(value)
    return f"{value} [instanceof {cls.__module__}.{cls.__qualname__}]"
