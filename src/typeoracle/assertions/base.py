"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True)
class Fact:
    """A labeled piece of diagnostic information.

    Attributes:
        label: What the fact describes (e.g. "provided").
        value: The observed value, or None for a simple fact that is
            only a statement (e.g. "equality should be symmetric").
    """

    label: str
    value: Any = None

    @property
    def is_simple(self) -> bool:
        return self.value is None


def fact(label: str, value: Any) -> Fact:
    # A None value still needs to show up, so keep it as text.
    return Fact(label, "None" if value is None else value)


def simple_fact(label: str) -> Fact:
    return Fact(label)


def format_facts(facts: Sequence[Fact]) -> str:
    """Render facts one per line with labels padded to a common width."""
    width = max((len(f.label) for f in facts if not f.is_simple), default=0)
    lines: list[str] = []
    for f in facts:
        if f.is_simple:
            lines.append(f.label)
        else:
            lines.append(f"{f.label.ljust(width)}: {f.value}")
    return "\n".join(lines)


@dataclass(frozen=True)
class Failure:
    """One reported assertion failure.

    Attributes:
        name: The assertion operation that reported it (e.g. "is_equal_to").
        facts: Ordered diagnostic facts, the complete failure payload.
    """

    name: str
    facts: tuple[Fact, ...]

    @property
    def headline(self) -> str:
        return self.facts[0].label if self.facts else self.name

    def render(self) -> str:
        return format_facts(self.facts)
