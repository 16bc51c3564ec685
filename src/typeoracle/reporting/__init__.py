"""Failure reporting for type assertions."""

from typeoracle.reporting.junit import write_junit
from typeoracle.reporting.reporters import (
    CollectingReporter,
    FailureReporter,
    RaisingReporter,
    TypeAssertionError,
)

__all__ = [
    "CollectingReporter",
    "FailureReporter",
    "RaisingReporter",
    "TypeAssertionError",
    "write_junit",
]
