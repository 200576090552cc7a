"""Tests for debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from verbytes import AssertionFailure, should_string
from verbytes.verbose import setup_logger


def test_setup_logger_writes_failures_to_debug_file(tmp_path: Path):
    debug_file = tmp_path / "logs" / "debug.log"
    setup_logger(debug_file)

    with pytest.raises(AssertionFailure):
        should_string("abc").be("abd")

    content = debug_file.read_text()
    assert 'Assertion failed: Expected string to be "abd", but found "abc".' in content


def test_setup_logger_verbose_writes_to_stderr(capsys):
    setup_logger(verbose=True)

    with pytest.raises(AssertionFailure):
        should_string("abc").contain("z")

    captured = capsys.readouterr()
    assert "Assertion failed: Expected string \"abc\" to contain \"z\"" in captured.err


def test_setup_logger_clears_previous_handlers(tmp_path: Path):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"

    setup_logger(first)
    logger = setup_logger(second)

    assert len(logger.handlers) == 1
    logger.debug("only in second")

    assert "only in second" in second.read_text()
    assert "only in second" not in first.read_text()


def test_setup_logger_without_outputs_is_silent():
    logger = setup_logger()

    assert logger.level == logging.DEBUG
    assert all(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_passing_assertions_do_not_log(tmp_path: Path):
    debug_file = tmp_path / "debug.log"
    setup_logger(debug_file)

    should_string("abc").be("abc")

    assert debug_file.read_text() == ""


def test_custom_logger_name(tmp_path: Path):
    log = tmp_path / "custom.log"
    logger = setup_logger(log, logger_name="verbytes_custom")

    assert logger.name == "verbytes_custom"
    logger.debug("hello")
    assert "hello" in log.read_text()
    logger.handlers.clear()
