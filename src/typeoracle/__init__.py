"""Test oracle for type values: predicates plus equivalence-law checks."""

from typeoracle.assertions import (
    Equivalence,
    Fact,
    Failure,
    TypeSubject,
    assert_type,
    types,
)
from typeoracle.capabilities import ObjectTypeValue, TypeValue
from typeoracle.debug import debug_string_of
from typeoracle.reporting import (
    CollectingReporter,
    FailureReporter,
    RaisingReporter,
    TypeAssertionError,
)

__all__ = [
    "CollectingReporter",
    "Equivalence",
    "Fact",
    "Failure",
    "FailureReporter",
    "ObjectTypeValue",
    "RaisingReporter",
    "TypeAssertionError",
    "TypeSubject",
    "TypeValue",
    "assert_type",
    "debug_string_of",
    "types",
]
