from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from junitparser import Failure as JUnitFailure
from junitparser import JUnitXml, TestCase, TestSuite

from typeoracle.assertions.base import Failure

logger = logging.getLogger(__name__)


def write_junit(
    path: Path, failures: Sequence[Failure], suite_name: str = "typeoracle"
) -> Path:
    """Write collected type assertion failures to junit.xml, return path."""
    xml = JUnitXml()
    suite = TestSuite(suite_name)

    # One test case per failure; names repeat when an assertion breaks
    # several laws, so number them.
    for index, failure in enumerate(failures, start=1):
        case = TestCase(f"{index}: {failure.name or 'assertion'}")
        case.classname = suite_name
        result = JUnitFailure(failure.headline)
        result.text = failure.render()
        case.result = [result]
        suite.add_testcase(case)

    # Use append (not +=) to keep the suite as a single element
    xml.append(suite)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    logger.debug(f"Wrote {len(failures)} failure(s) to {path}")
    return path
