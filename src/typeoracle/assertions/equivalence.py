"""Equivalence relations checked by TypeSubject."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typeoracle.capabilities import TypeValue


class Equivalence(str, Enum):
    NATURAL = "natural"
    STRUCTURAL = "structural"

    def test(self, receiver: TypeValue | None, parameter: TypeValue | None) -> bool:
        # As long as there is a real receiver we want to see how its methods
        # handle any parameter, including None.
        if receiver is None:
            return parameter is None
        return self.null_unsafe_test(receiver, parameter)

    def null_unsafe_test(self, receiver: TypeValue, parameter: TypeValue | None) -> bool:
        """Call the method on *receiver* that defines this equivalence."""
        if self is Equivalence.NATURAL:
            # Only the receiver's __eq__ is consulted; going through ``==``
            # would fall back to the reflected call and hide asymmetry.
            result = receiver.__eq__(parameter)
            if result is NotImplemented:
                return receiver is parameter
            return bool(result)
        if self is Equivalence.STRUCTURAL:
            return bool(receiver.is_equivalent_to(parameter, True))
        raise ValueError(f"Unknown equivalence: {self!r}")

    def stringify(self, receiver: str, parameter: str) -> str:
        """Describe ``test(receiver, parameter)`` for failure messages."""
        if self is Equivalence.NATURAL:
            return f"({receiver}) == ({parameter})"
        if self is Equivalence.STRUCTURAL:
            return f"({receiver}).is_equivalent_to(({parameter}), True)"
        raise ValueError(f"Unknown equivalence: {self!r}")
