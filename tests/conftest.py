"""Shared fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_app_logging():
    """Drop handlers added by setup_app_logging so each test gets fresh streams and log dirs."""
    yield
    logger = logging.getLogger("quality_score")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
