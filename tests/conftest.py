"""Pytest configuration and fixtures."""

import logging

import pytest

from typeoracle import CollectingReporter
from typeoracle.verbose import teardown_logger


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers added by setup_logger so logger names can be reused."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("typeoracle"):
            continue
        teardown_logger(logging.getLogger(name))
        # Module loggers stay registered; only drop the ad-hoc test loggers
        if name.startswith("typeoracle_"):
            del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def collector() -> CollectingReporter:
    return CollectingReporter()
