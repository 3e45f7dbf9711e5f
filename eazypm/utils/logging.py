"""Loguru configuration shared by every eazypm module.

Configured once at import. Log lines go to stderr in a short human format,
or as Pino-style NDJSON when EAZYPM_LOG_JSON=1 so they can be read with the
same viewers as Node.js tool output.

Usage:
    from eazypm.utils.logging import logger
    logger.debug(f"Running {cmd}")

Environment Variables:
    EAZYPM_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: WARNING)
    EAZYPM_LOG_JSON: 0|1 (default: 0)
    EAZYPM_LOG_FILE: append NDJSON at DEBUG level to this path
"""

import json
import os
import sys

from loguru import logger

from .constants import ENV_LOG_FILE, ENV_LOG_JSON, ENV_LOG_LEVEL

# Numeric levels as Pino writes them
_NDJSON_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "SUCCESS": 30,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}

# Prompts and the spinner own the terminal, so stay quiet unless asked
LOG_LEVEL = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
JSON_MODE = os.environ.get(ENV_LOG_JSON, "0") == "1"
LOG_FILE = os.environ.get(ENV_LOG_FILE)

_HUMAN_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"

# Handler writing human lines to stderr; None while a spinner owns the output
_stderr_handler_id: int | None = None


def _ndjson_line(record) -> str:
    entry = {
        "level": _NDJSON_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "pid": record["process"].id,
        "name": record["name"],
        "msg": record["message"],
        **record["extra"],
    }
    exc = record["exception"]
    if exc is not None and exc.type is not None:
        entry["err"] = {"type": exc.type.__name__, "message": str(exc.value)}
    return json.dumps(entry, default=str)


def _ndjson_stderr_sink(message) -> None:
    # Must not log from here: loguru would re-enter this sink
    sys.stderr.write(_ndjson_line(message.record) + "\n")
    sys.stderr.flush()


def _ndjson_file_sink(message) -> None:
    with open(LOG_FILE, "a", encoding="utf-8") as f:
        f.write(_ndjson_line(message.record) + "\n")


def _add_stderr_handler() -> int:
    return logger.add(sys.stderr, level=LOG_LEVEL, format=_HUMAN_FORMAT, colorize=None)


logger.remove()

if JSON_MODE:
    logger.add(_ndjson_stderr_sink, level=LOG_LEVEL, colorize=False)
else:
    _stderr_handler_id = _add_stderr_handler()

if LOG_FILE:
    logger.add(_ndjson_file_sink, level="DEBUG")


def swap_to_rich_sink(rich_sink_fn) -> int | None:
    """Route human log lines through rich_sink_fn while a spinner is live.

    Direct stderr writes would be drawn over by the spinner; the Rich console
    prints above it instead.

    Returns:
        Handler ID to pass to restore_stderr_sink(), or None when nothing
        was swapped (JSON mode, or already swapped).
    """
    global _stderr_handler_id

    if JSON_MODE or _stderr_handler_id is None:
        return None

    logger.remove(_stderr_handler_id)
    _stderr_handler_id = None
    return logger.add(rich_sink_fn, level=LOG_LEVEL, format=_HUMAN_FORMAT, colorize=True)


def restore_stderr_sink(rich_handler_id: int | None) -> None:
    """Undo swap_to_rich_sink() once the spinner has stopped."""
    global _stderr_handler_id

    if rich_handler_id is None or _stderr_handler_id is not None:
        return

    logger.remove(rich_handler_id)
    _stderr_handler_id = _add_stderr_handler()


__all__ = [
    "logger",
    "swap_to_rich_sink",
    "restore_stderr_sink",
]
