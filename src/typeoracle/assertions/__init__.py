"""Assertion system for type values."""

from typeoracle.assertions.base import Fact, Failure
from typeoracle.assertions.equivalence import Equivalence
from typeoracle.assertions.subject import TypeSubject, assert_type, types

__all__ = ["Equivalence", "Fact", "Failure", "TypeSubject", "assert_type", "types"]
