"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_verbytes_logger():
    """Reset the verbytes package logger after each test so handlers don't leak."""
    yield

    logger = logging.getLogger("verbytes")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


class _Exploding:
    """Counts renders and raises, to prove a message is never built on success."""

    def __init__(self):
        self.renders = 0

    def __str__(self):
        self.renders += 1
        raise RuntimeError("rendered on the success path")


@pytest.fixture
def exploding():
    return _Exploding()
