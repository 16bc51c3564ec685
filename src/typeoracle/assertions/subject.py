"""Fluent assertions about type values.

Usage::

    from typeoracle import assert_type

    assert_type(type1).is_literal_object()
    assert_type(type2).is_object_type_with_property("x").with_type_of_prop("x").is_number()
    assert_type(type3).is_equal_to(type4)
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from typeoracle.assertions.base import Fact, fact, simple_fact
from typeoracle.assertions.equivalence import Equivalence
from typeoracle.capabilities import TypeValue
from typeoracle.debug import debug_string_of
from typeoracle.reporting.reporters import FailureReporter, RaisingReporter

logger = logging.getLogger(__name__)

_DEFAULT_REPORTER = RaisingReporter()
_UNHASHABLE = "<unhashable>"


def _hash_or_none(value: TypeValue | None) -> int | None:
    # A type that defines __eq__ without __hash__ is unhashable
    try:
        return hash(value)
    except TypeError:
        return None


def assert_type(
    value: TypeValue | None, reporter: FailureReporter | None = None
) -> TypeSubject:
    """Start an assertion chain about *value*.

    Failures raise ``TypeAssertionError`` unless another reporter is given.
    """
    return types(reporter)(value)


def types(
    reporter: FailureReporter | None = None,
) -> Callable[[TypeValue | None], TypeSubject]:
    """Return a factory that wraps type values in subjects sharing *reporter*."""
    sink = reporter if reporter is not None else _DEFAULT_REPORTER

    def factory(value: TypeValue | None) -> TypeSubject:
        return TypeSubject(value, sink)

    return factory


class TypeSubject:
    """Wraps one type value (or None) and checks facts about it."""

    def __init__(
        self,
        actual: TypeValue | None,
        reporter: FailureReporter,
        path: str = "type",
        parent: str | None = None,
    ):
        """
        Args:
            actual: The type value under test, or None.
            reporter: Where failures go.
            path: How *actual* was reached, used in "value of" facts.
            parent: Debug string of the type *actual* was looked up on,
                for subjects created by ``with_type_of_prop``.
        """
        self._actual = actual
        self._reporter = reporter
        self._path = path
        self._parent = parent

    @property
    def actual(self) -> TypeValue | None:
        return self._actual

    def __repr__(self) -> str:
        return debug_string_of(self._actual)

    # --- presence ---

    def is_present(self) -> None:
        if self._actual is None:
            self._fail("is_present", simple_fact("expected a present value"))

    def is_absent(self) -> None:
        if self._actual is not None:
            self._fail("is_absent", simple_fact("expected an absent value"))

    # --- predicates ---

    def is_number(self) -> None:
        self._check_capability("is_number", "is_number_value_type()", True)

    def is_string(self) -> None:
        self._check_capability("is_string", "is_string_value_type()", True)

    def is_boolean(self) -> None:
        self._check_capability("is_boolean", "is_boolean_value_type()", True)

    def is_unknown(self) -> None:
        self._check_capability("is_unknown", "is_unknown_type()", True)

    def is_not_unknown(self) -> None:
        self._check_capability("is_not_unknown", "is_unknown_type()", False)

    def is_not_empty(self) -> None:
        self._check_capability("is_not_empty", "is_empty_type()", False)

    def is_literal_object(self) -> None:
        self._check_capability("is_literal_object", "is_literal_object()", True)

    def is_subtype_of(self, super_type: TypeValue) -> None:
        actual = self._actual_non_null("is_subtype_of")
        if actual is None:
            return
        result = actual.is_subtype_of(super_type)
        if not result:
            self._fail(
                "is_subtype_of",
                fact("value of", f"{self._path}.is_subtype_of({debug_string_of(super_type)})"),
                fact("expected", True),
                fact("but was", result),
            )

    def to_string_is_equal_to(self, type_string: str) -> None:
        actual = self._actual_non_null("to_string_is_equal_to")
        if actual is None:
            return
        rendered = str(actual)
        if rendered != type_string:
            self._fail(
                "to_string_is_equal_to",
                fact("value of", f"str({self._path})"),
                fact("expected", repr(type_string)),
                fact("but was", repr(rendered)),
            )

    # --- properties ---

    def is_object_type_with_property(self, prop_name: str) -> TypeSubject:
        self.is_literal_object()
        self.with_type_of_prop(prop_name).is_present()
        return self

    def with_type_of_prop(self, prop_name: str) -> TypeSubject:
        """Return a subject for the type of property *prop_name*.

        Assumes the actual value is an object type with that property, so it
        should run after ``is_object_type_with_property``. A missing property
        yields a subject wrapping None.
        """
        path = f"{self._path}.to_maybe_object_type().get_property_type({prop_name!r})"
        actual = self._actual_non_null("with_type_of_prop")
        if actual is None or not self._check_capability(
            "with_type_of_prop", "is_object_type()", True
        ):
            return TypeSubject(None, self._reporter, path, debug_string_of(actual))

        object_type = actual.to_maybe_object_type()
        prop_type = (
            object_type.get_property_type(prop_name) if object_type is not None else None
        )
        return TypeSubject(prop_type, self._reporter, path, debug_string_of(actual))

    def is_object_type_without_property(self, prop_name: str) -> None:
        self.is_literal_object()
        self.with_type_of_prop(prop_name).is_absent()

    # --- equality ---

    def is_equal_to(self, provided: Any) -> None:
        if provided is not None and not isinstance(provided, TypeValue):
            cls = type(provided)
            self._fail(
                "is_equal_to",
                fact("expected an instance of", "TypeValue"),
                fact("but was instance of", f"{cls.__module__}.{cls.__qualname__}"),
                fact("with value", repr(provided)),
            )
            return
        self._check_equality_against(provided, True, Equivalence.NATURAL, "is_equal_to")

    def is_not_equal_to(self, provided: TypeValue | None) -> None:
        self._check_equality_against(
            provided, False, Equivalence.NATURAL, "is_not_equal_to"
        )

    def is_structurally_equal_to(self, provided: TypeValue | None) -> None:
        self._check_equality_against(
            provided, True, Equivalence.STRUCTURAL, "is_structurally_equal_to"
        )

    def is_not_structurally_equal_to(self, provided: TypeValue | None) -> None:
        self._check_equality_against(
            provided, False, Equivalence.STRUCTURAL, "is_not_structurally_equal_to"
        )

    # --- internals ---

    def _fail(self, name: str, *facts: Fact) -> None:
        context: list[Fact] = []
        if self._parent is not None:
            # Nested subjects say how they were reached
            if not any(f.label == "value of" for f in facts):
                context.append(fact("value of", self._path))
            context.append(fact("parent", self._parent))
        self._reporter.report(
            [*facts, *context, fact("actual", debug_string_of(self._actual))], name=name
        )

    def _actual_non_null(self, name: str) -> TypeValue | None:
        if self._actual is None:
            self._fail(name, simple_fact("expected a present value"))
        return self._actual

    def _check_capability(self, name: str, capability: str, expected: bool) -> bool:
        """Check that ``actual.<capability>`` returns *expected*; return whether it did."""
        actual = self._actual_non_null(name)
        if actual is None:
            return False
        method = getattr(actual, capability.removesuffix("()"))
        result = method()
        if bool(result) != expected:
            self._fail(
                name,
                fact("value of", f"{self._path}.{capability}"),
                fact("expected", expected),
                fact("but was", result),
            )
            return False
        return True

    def _check_equality_against(
        self,
        provided: TypeValue | None,
        expectation: bool,
        equivalence: Equivalence,
        name: str,
    ) -> None:
        actual = self._actual
        provided_string = debug_string_of(provided)
        actual_string = debug_string_of(actual)

        actual_equals_provided = equivalence.test(actual, provided)
        if actual_equals_provided != expectation:
            self._fail(
                name,
                fact("types expected to be equal", expectation),
                fact(
                    equivalence.stringify(actual_string, provided_string),
                    actual_equals_provided,
                ),
                fact("provided", provided_string),
            )

        provided_equals_actual = equivalence.test(provided, actual)
        logger.debug(
            f"{equivalence.value} check: {actual_string} vs {provided_string}: "
            f"forward={actual_equals_provided}, backward={provided_equals_actual}"
        )
        if actual_equals_provided != provided_equals_actual:
            self._fail(
                name,
                simple_fact("equality should be symmetric"),
                fact(
                    equivalence.stringify(actual_string, provided_string),
                    actual_equals_provided,
                ),
                fact(
                    equivalence.stringify(provided_string, actual_string),
                    provided_equals_actual,
                ),
                fact("provided", provided_string),
            )

        if expectation:
            actual_hash = _hash_or_none(actual)
            provided_hash = _hash_or_none(provided)
            if actual_hash is None or provided_hash is None or actual_hash != provided_hash:
                self._fail(
                    name,
                    simple_fact("if two types are equal their hashes must also be equal"),
                    fact("hash(actual)", _UNHASHABLE if actual_hash is None else actual_hash),
                    fact("hash(provided)", _UNHASHABLE if provided_hash is None else provided_hash),
                    fact("provided", provided_string),
                )
