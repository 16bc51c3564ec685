"""Capability surface the oracle needs from the type system under test."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TypeValue(Protocol):
    """A type value produced by the type system under test.

    Implementations must tolerate ``None`` in ``__eq__`` and
    ``is_equivalent_to``; the oracle deliberately passes it through to
    exercise that handling.
    """

    def is_number_value_type(self) -> bool: ...

    def is_string_value_type(self) -> bool: ...

    def is_boolean_value_type(self) -> bool: ...

    def is_unknown_type(self) -> bool: ...

    def is_empty_type(self) -> bool: ...

    def is_literal_object(self) -> bool: ...

    def is_object_type(self) -> bool: ...

    def to_maybe_object_type(self) -> ObjectTypeValue | None: ...

    def is_subtype_of(self, other: TypeValue) -> bool: ...

    def is_equivalent_to(
        self, other: TypeValue | None, ignore_nominal: bool
    ) -> bool: ...


@runtime_checkable
class ObjectTypeValue(TypeValue, Protocol):
    def get_property_type(self, name: str) -> TypeValue | None: ...
