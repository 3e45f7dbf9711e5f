"""Run data contracts and terminal presentation."""
from .structures import (
    CancellationToken,
    InstallCommand,
    ReinstallOutcome,
    RunContext,
    RunStage,
    StepResult,
    TaskStatus,
)
from .ui import console, print_banner, print_command, print_error, print_warning

__all__ = [
    "CancellationToken", "InstallCommand", "ReinstallOutcome", "RunContext", "RunStage",
    "StepResult", "TaskStatus",
    "console", "print_banner", "print_command", "print_error",
    "print_warning",
]
