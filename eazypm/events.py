"""Event system for reinstall observers.

Decouples the orchestrator from presentation. Observers must handle their
own exceptions.
"""

from typing import Protocol


class ReinstallObserver(Protocol):
    """Observer interface for orchestrator events."""

    def on_step_start(self, name: str, index: int, total: int) -> None:
        """Called when a step begins."""
        ...

    def on_step_complete(self, name: str, elapsed: float) -> None:
        """Called when a step succeeds."""
        ...

    def on_step_failed(self, name: str, error: str, exit_code: int) -> None:
        """Called when a step fails or is cancelled."""
        ...

