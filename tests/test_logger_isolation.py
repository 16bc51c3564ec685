"""Test logger isolation so parallel suites do not share a debug log."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from typeoracle.verbose import setup_logger, teardown_logger


def test_unique_logger_names_create_separate_instances(tmp_path: Path):
    log1 = tmp_path / "suite1.log"
    log2 = tmp_path / "suite2.log"

    logger1 = setup_logger(log1, verbose=False, logger_name="typeoracle_suite1")
    logger2 = setup_logger(log2, verbose=False, logger_name="typeoracle_suite2")

    assert logger1 is not logger2

    logger1.debug("Message from suite1")
    logger2.debug("Message from suite2")

    assert "Message from suite1" in log1.read_text()
    assert "Message from suite2" not in log1.read_text()
    assert "Message from suite2" in log2.read_text()
    assert "Message from suite1" not in log2.read_text()


def test_same_logger_name_raises_error(tmp_path: Path):
    setup_logger(tmp_path / "log1.log", verbose=False, logger_name="typeoracle_shared")

    with pytest.raises(RuntimeError) as exc_info:
        setup_logger(tmp_path / "log2.log", verbose=False, logger_name="typeoracle_shared")

    error_msg = str(exc_info.value)
    assert "typeoracle_shared" in error_msg
    assert "already exists" in error_msg


def test_verbose_mode_adds_stderr_handler(tmp_path: Path):
    log_file = tmp_path / "verbose.log"

    logger1 = setup_logger(log_file, verbose=False, logger_name="typeoracle_verbose_off")
    assert len(logger1.handlers) == 1
    assert isinstance(logger1.handlers[0], logging.FileHandler)

    logger2 = setup_logger(log_file, verbose=True, logger_name="typeoracle_verbose_on")
    assert len(logger2.handlers) == 2
    handler_types = [type(h).__name__ for h in logger2.handlers]
    assert "FileHandler" in handler_types
    assert "StreamHandler" in handler_types


def test_creates_parent_directories(tmp_path: Path):
    log_file = tmp_path / "nested" / "dir" / "debug.log"
    logger = setup_logger(log_file, logger_name="typeoracle_nested")
    logger.debug("hello")
    assert log_file.exists()


def test_log_line_format(tmp_path: Path):
    log_file = tmp_path / "fmt.log"
    logger = setup_logger(log_file, logger_name="typeoracle_fmt")
    logger.debug("formatted")
    line = log_file.read_text().splitlines()[0]
    assert line.startswith("[")
    assert line.endswith("] formatted")


def test_teardown_allows_name_reuse(tmp_path: Path):
    logger = setup_logger(tmp_path / "first.log", logger_name="typeoracle_reused")
    logger.debug("first run")
    teardown_logger(logger)
    assert logger.handlers == []

    logger = setup_logger(tmp_path / "second.log", logger_name="typeoracle_reused")
    logger.debug("second run")
    assert "second run" in (tmp_path / "second.log").read_text()
    assert "second run" not in (tmp_path / "first.log").read_text()


def test_accepts_string_path(tmp_path: Path):
    logger = setup_logger(str(tmp_path / "str.log"), logger_name="typeoracle_str_path")
    logger.debug("from str path")
    assert "from str path" in (tmp_path / "str.log").read_text()
