"""Centralized exit codes for the eazypm CLI."""


class ExitCodes:
    """Standard exit codes for the eazypm CLI."""

    SUCCESS = 0

    # Run could not start: no dependencies, unreadable manifest,
    # or no supported package manager installed.
    TASK_INCOMPLETE = 1

    # Ctrl+C ends the run quietly
    INTERRUPTED = 0

