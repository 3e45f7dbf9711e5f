"""Tests for the loguru setup shared by eazypm modules."""

import json

import pytest

from eazypm.utils import logging as eazypm_logging
from eazypm.utils.logging import logger, restore_stderr_sink, swap_to_rich_sink


@pytest.mark.skipif(eazypm_logging.JSON_MODE, reason="human output only")
def test_spinner_sink_swap_and_restore():
    captured = []

    handler_id = swap_to_rich_sink(captured.append)
    assert swap_to_rich_sink(captured.append) is None
    logger.warning("npm exited with code 1")
    restore_stderr_sink(handler_id)
    logger.warning("after restore")

    assert len(captured) == 1
    assert "npm exited with code 1" in str(captured[0])


def test_ndjson_line():
    lines = []
    handler_id = logger.add(lambda m: lines.append(eazypm_logging._ndjson_line(m.record)), level="DEBUG")
    try:
        logger.bind(step="remove").error("failed")
    finally:
        logger.remove(handler_id)

    entry = json.loads(lines[0])
    assert entry["level"] == 50
    assert entry["msg"] == "failed"
    assert entry["step"] == "remove"
