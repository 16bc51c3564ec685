"""Failure sinks for type assertions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Sequence

from typeoracle.assertions.base import Failure, Fact, format_facts

logger = logging.getLogger(__name__)


class TypeAssertionError(AssertionError):
    """A type assertion did not hold."""

    def __init__(self, facts: Sequence[Fact], message: str | None = None):
        self.facts = tuple(facts)
        super().__init__(message if message is not None else format_facts(self.facts))


class FailureReporter(Protocol):
    def report(self, facts: Sequence[Fact], name: str = "") -> None:
        """Report one failure. May raise to end the current assertion."""
        ...


class RaisingReporter:
    """Raises TypeAssertionError on the first report."""

    def report(self, facts: Sequence[Fact], name: str = "") -> None:
        logger.debug(f"{name or 'assertion'} failed: {facts[0].label if facts else ''}")
        raise TypeAssertionError(facts)


class CollectingReporter:
    """Records every failure and keeps going.

    Lets a single assertion surface every broken law at once. Call
    ``verify()`` at the end of a test to turn collected failures into a
    test failure. Not thread-safe; use one per test.
    """

    def __init__(self) -> None:
        self.failures: list[Failure] = []

    def report(self, facts: Sequence[Fact], name: str = "") -> None:
        failure = Failure(name=name, facts=tuple(facts))
        logger.info(f"Recorded failure from {name or 'assertion'}: {failure.headline}")
        self.failures.append(failure)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    def clear(self) -> None:
        self.failures.clear()

    def verify(self) -> None:
        """Raise TypeAssertionError summarising all recorded failures, if any."""
        if not self.failures:
            return
        count = len(self.failures)
        noun = "failure" if count == 1 else "failures"
        blocks = [f"{count} type assertion {noun}"]
        for i, failure in enumerate(self.failures, start=1):
            blocks.append(f"\n{i}. {failure.name}\n{failure.render()}")
        facts = [f for failure in self.failures for f in failure.facts]
        raise TypeAssertionError(facts, message="\n".join(blocks))

    def write_junit(self, path: Path, suite_name: str = "typeoracle") -> Path:
        from typeoracle.reporting.junit import write_junit

        return write_junit(path, self.failures, suite_name=suite_name)
