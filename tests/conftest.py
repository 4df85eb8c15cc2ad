"""Pytest fixtures for the tool gate test suite."""

import pytest
from loguru import logger


# ============================================================================
# LOG CAPTURE
# ============================================================================


@pytest.fixture
def log_messages():
    """
    Capture loguru output as ``"LEVEL message"`` strings.

    Yields:
        List that receives one entry per log record
    """
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg), format="{level} {message}")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
