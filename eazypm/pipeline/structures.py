"""Data contracts for a reinstall run."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class TaskStatus(Enum):
    """Status of a single reinstall step."""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
    CANCELLED = "cancelled"


class RunStage(Enum):
    """Stages of a run, in the only order they can be visited."""
    IDLE = "idle"
    ENSURE_SCANNER = "ensure_scanner"
    COMMAND_GENERATED = "command_generated"
    BACKUP = "backup"
    REMOVE_PACKAGES = "remove_packages"
    NATIVE_INSTALL = "native_install"
    SCANNER_INSTALL = "scanner_install"
    DONE = "done"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass
class StepResult:
    """Result of one stage transition.

    Returned instead of raising so the orchestrator can stop the chain on the
    first failure and report it once.
    """
    name: str
    status: TaskStatus
    elapsed: float = 0.0
    exit_code: int = 0
    error: str = ""

    @property
    def success(self) -> bool:
        """True if the step completed or was legitimately skipped."""
        return self.status in (TaskStatus.SUCCESS, TaskStatus.SKIPPED)


@dataclass
class InstallCommand:
    """The scanner-wrapped install, kept as argv for execution."""
    argv: list[str]

    def __str__(self) -> str:
        return " ".join(self.argv)


class CancellationToken:
    """Checked between subprocess steps; set when the user interrupts a step."""

    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


@dataclass
class RunContext:
    """Configuration that flows through a run.

    Replaces any module-level capture of the working directory.
    """
    root: Path
    config: dict[str, Any]
    token: CancellationToken = field(default_factory=CancellationToken)

    @property
    def command_file(self) -> Path:
        return self.root / self.config["paths"]["command_file"]

    @property
    def scanner_prefix(self) -> str:
        return self.config["scanner"]["prefix"]


@dataclass
class ReinstallOutcome:
    """Final state of the backup/remove/install chain."""
    stage: RunStage
    steps: list[StepResult] = field(default_factory=list)
    backup_dir: Path | None = None

    @property
    def success(self) -> bool:
        return self.stage == RunStage.DONE

    @property
    def failure(self) -> StepResult | None:
        """The step that stopped the chain, if any."""
        for step in self.steps:
            if step.status in (TaskStatus.FAILED, TaskStatus.CANCELLED):
                return step
        return None
