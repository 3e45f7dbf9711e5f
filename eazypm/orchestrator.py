"""Backup and reinstall orchestration.

A run walks the stages below exactly once, in order:

    IDLE -> ENSURE_SCANNER -> COMMAND_GENERATED
         -> BACKUP -> REMOVE_PACKAGES -> NATIVE_INSTALL -> SCANNER_INSTALL
         -> DONE | FAILED | CANCELLED

The second line only runs after the user confirms. Every transition returns
a StepResult; the first failed or cancelled step stops the chain. Nothing is
rolled back: after a mid-chain failure the backup holds the previous state
and node_modules may be incomplete.
"""

from __future__ import annotations

import time
from pathlib import Path

from eazypm.backup import backup_project
from eazypm.events import ReinstallObserver
from eazypm.exceptions import EazypmError
from eazypm.manifest import Dependency, read_declared_names
from eazypm.package_managers import get_manager
from eazypm.pipeline.structures import (
    InstallCommand,
    ReinstallOutcome,
    RunContext,
    RunStage,
    StepResult,
    TaskStatus,
)
from eazypm.runner import run_command
from eazypm.utils.constants import SCANNER_PREFIX
from eazypm.utils.logging import logger

_STAGE_ORDER = [
    RunStage.IDLE,
    RunStage.ENSURE_SCANNER,
    RunStage.COMMAND_GENERATED,
    RunStage.BACKUP,
    RunStage.REMOVE_PACKAGES,
    RunStage.NATIVE_INSTALL,
    RunStage.SCANNER_INSTALL,
    RunStage.DONE,
]
_TERMINAL = {RunStage.DONE, RunStage.FAILED, RunStage.CANCELLED}

REINSTALL_MESSAGE = "Reinstalling dependencies using safe-chain"


def build_scanner_command(
    pm: str, deps: list[Dependency], prefix: str = SCANNER_PREFIX
) -> InstallCommand:
    """Scanner install command for every dependency.

    build_scanner_command("npm", [Dependency("a", "1.0.0")]) -> aikido-npm install a@1.0.0
    """
    mgr = get_manager(pm)
    if mgr is None:
        raise ValueError(f"Unsupported package manager: {pm}")
    return InstallCommand(mgr.scanner_args(deps, prefix=prefix))


class Orchestrator:
    """Drives one reinstall run for the selected package manager."""

    def __init__(self, ctx: RunContext, pm: str, observer: ReinstallObserver | None = None):
        mgr = get_manager(pm)
        if mgr is None:
            raise ValueError(f"Unsupported package manager: {pm}")
        self.ctx = ctx
        self.manager = mgr
        self.observer = observer
        self.stage = RunStage.IDLE
        self.command: InstallCommand | None = None
        self.backup_dir: Path | None = None

    def _enter(self, stage: RunStage) -> None:
        if self.stage in _TERMINAL:
            raise RuntimeError(f"Run already finished ({self.stage.value})")
        if _STAGE_ORDER.index(stage) != _STAGE_ORDER.index(self.stage) + 1:
            raise RuntimeError(f"Cannot move from {self.stage.value} to {stage.value}")
        logger.debug(f"Stage {self.stage.value} -> {stage.value}")
        self.stage = stage

    def _finish(self, result: StepResult) -> StepResult:
        """Move to a terminal stage when result stops the run."""
        if result.status == TaskStatus.CANCELLED:
            self.stage = RunStage.CANCELLED
        elif result.status == TaskStatus.FAILED:
            self.stage = RunStage.FAILED
        return result

    def _notify_start(self, name: str, index: int, total: int) -> None:
        if self.observer:
            self.observer.on_step_start(name, index, total)

    def _notify_result(self, result: StepResult) -> None:
        if not self.observer:
            return
        if result.success:
            self.observer.on_step_complete(result.name, result.elapsed)
        else:
            self.observer.on_step_failed(result.name, result.error, result.exit_code)

    # ------------------------------------------------------------------
    # Preparation (always runs)
    # ------------------------------------------------------------------

    def ensure_scanner(self) -> StepResult:
        """Make sure the scanner wrapper runs; install it locally without saving if not."""
        self._enter(RunStage.ENSURE_SCANNER)
        binary = self.manager.scanner_binary(self.ctx.scanner_prefix)

        probe = run_command(f"Checking {binary}", [binary, "--version"], self.ctx.root, self.ctx.token)
        if probe.status != TaskStatus.FAILED:
            return self._finish(probe)

        description = f"Installing {binary} locally"
        self._notify_start(description, 1, 1)
        bootstrap = self.ctx.config["scanner"]["bootstrap_manager"]
        result = run_command(
            description,
            [bootstrap, "install", "--no-save", binary],
            self.ctx.root,
            self.ctx.token,
        )
        return self._finish(result)

    def generate_command(self, deps: list[Dependency]) -> StepResult:
        """Build the scanner install command and save it to the command file."""
        self._enter(RunStage.COMMAND_GENERATED)
        self.command = build_scanner_command(
            self.manager.manager_name, deps, prefix=self.ctx.scanner_prefix
        )

        path = self.ctx.command_file
        try:
            path.write_text(str(self.command), encoding="utf-8")
        except OSError as e:
            return self._finish(StepResult("Saving install command", TaskStatus.FAILED, exit_code=-1,
                                           error=f"Could not write {path}: {e}"))

        logger.debug(f"Install command saved to {path}")
        return StepResult("Saving install command", TaskStatus.SUCCESS)

    # ------------------------------------------------------------------
    # Reinstall chain (only after confirmation)
    # ------------------------------------------------------------------

    def backup(self) -> StepResult:
        """Copy manifest/lockfiles into a timestamped directory and move node_modules there."""
        self._enter(RunStage.BACKUP)
        description = "Backing up project"
        start = time.time()
        try:
            self.backup_dir = backup_project(
                self.ctx.root, prefix=self.ctx.config["paths"]["backup_prefix"]
            )
        except EazypmError as e:
            return self._finish(StepResult(description, TaskStatus.FAILED,
                                           elapsed=time.time() - start, exit_code=-1, error=str(e)))
        return StepResult(description, TaskStatus.SUCCESS, elapsed=time.time() - start)

    def _remove_packages(self, description: str) -> StepResult:
        self._enter(RunStage.REMOVE_PACKAGES)
        try:
            names = read_declared_names(self.ctx.root)
        except EazypmError as e:
            return StepResult(description, TaskStatus.FAILED, exit_code=-1, error=str(e))

        if not names:
            logger.debug("No runtime dependencies declared, nothing to remove")
            return StepResult(description, TaskStatus.SKIPPED)
        return run_command(description, self.manager.remove_args(names), self.ctx.root, self.ctx.token)

    def _native_install(self, description: str) -> StepResult:
        self._enter(RunStage.NATIVE_INSTALL)
        return run_command(description, self.manager.install_args(), self.ctx.root, self.ctx.token)

    def _scanner_install(self, description: str) -> StepResult:
        self._enter(RunStage.SCANNER_INSTALL)
        return run_command(description, self.command.argv, self.ctx.root, self.ctx.token)

    def reinstall(self) -> ReinstallOutcome:
        """Remove, install natively, then install through the scanner.

        Requires a successful backup(). Stops at the first step that fails
        or is cancelled; the token is checked before each step.
        """
        if self.stage != RunStage.BACKUP or self.command is None:
            raise RuntimeError("generate_command() and backup() must succeed before reinstall()")

        outcome = ReinstallOutcome(stage=self.stage, backup_dir=self.backup_dir)
        steps = [
            ("Removing existing packages", self._remove_packages),
            (REINSTALL_MESSAGE, self._native_install),
            (REINSTALL_MESSAGE, self._scanner_install),
        ]
        total = len(steps)

        for index, (description, step) in enumerate(steps, start=1):
            if self.ctx.token.cancelled:
                self.stage = RunStage.CANCELLED
                break

            self._notify_start(description, index, total)
            result = step(description)
            outcome.steps.append(result)
            self._notify_result(result)
            self._finish(result)

            if not result.success:
                break
        else:
            self._enter(RunStage.DONE)

        outcome.stage = self.stage
        return outcome
