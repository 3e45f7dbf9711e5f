"""Blocking subprocess execution for the reinstall chain.

Children run with stdout/stderr discarded and no timeout; a hung package
manager hangs eazypm until the user interrupts it.
"""

import shutil
import subprocess
import time
from pathlib import Path

from eazypm.pipeline.structures import CancellationToken, StepResult, TaskStatus
from eazypm.utils.logging import logger


def resolve_executable(name: str) -> str:
    """Full path of a binary on PATH (finds npm.cmd on Windows), else the bare name."""
    return shutil.which(name) or name


def run_command(
    description: str,
    cmd: list[str],
    cwd: Path,
    token: CancellationToken | None = None,
) -> StepResult:
    """Run cmd to completion and describe the outcome.

    Non-zero exit and spawn errors become FAILED results carrying
    "<binary> exited with code <n>" or the OS error. Ctrl+C while waiting
    cancels the token and yields a CANCELLED result.
    """
    start_time = time.time()

    if token is not None and token.cancelled:
        return StepResult(description, TaskStatus.CANCELLED, error="Cancelled before start")

    cmd_str = " ".join(cmd)
    logger.debug(f"[RUN] {description}: {cmd_str}")

    try:
        result = subprocess.run(
            [resolve_executable(cmd[0]), *cmd[1:]],
            cwd=str(cwd),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except KeyboardInterrupt:
        if token is not None:
            token.cancel()
        logger.debug(f"[CANCELLED] {description}")
        return StepResult(
            description,
            TaskStatus.CANCELLED,
            elapsed=time.time() - start_time,
            exit_code=-1,
            error=f"{cmd[0]} interrupted",
        )
    except OSError as e:
        logger.debug(f"[FAILED] {description}: {e}")
        return StepResult(
            description,
            TaskStatus.FAILED,
            elapsed=time.time() - start_time,
            exit_code=-1,
            error=f"{cmd[0]} could not be started: {e}",
        )

    elapsed = time.time() - start_time
    if result.returncode != 0:
        logger.debug(f"[FAILED] {description} (Exit: {result.returncode})")
        return StepResult(
            description,
            TaskStatus.FAILED,
            elapsed=elapsed,
            exit_code=result.returncode,
            error=f"{cmd[0]} exited with code {result.returncode}",
        )

    logger.debug(f"[OK] {description} ({elapsed:.1f}s)")
    return StepResult(description, TaskStatus.SUCCESS, elapsed=elapsed)
