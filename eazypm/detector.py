"""Package manager detection: which one the project uses, which ones are installed."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from eazypm.package_managers import (
    DEFAULT_MANAGER,
    DETECTION_ORDER,
    get_all_managers,
    get_manager,
)
from eazypm.runner import resolve_executable
from eazypm.utils.logging import logger

DEFAULT_VERSION_TIMEOUT = 30


@dataclass
class PackageManagerChoice:
    """One entry of the package manager selection prompt."""

    name: str
    detected: bool
    installed: bool

    @property
    def label(self) -> str:
        return f"{self.name} (detected)" if self.detected else self.name

    @property
    def disabled_hint(self) -> str | None:
        """Reason shown next to an unselectable entry, None when selectable."""
        return None if self.installed else "(not installed)"


def detect_pm(root: Path) -> str:
    """Return the manager owning the first lockfile found, in priority order.

    Falls back to npm when the project has no known lockfile.
    """
    root = Path(root)
    for name in DETECTION_ORDER:
        mgr = get_manager(name)
        if (root / mgr.lockfile).exists():
            logger.debug(f"Detected {name} from {mgr.lockfile}")
            return name
    return DEFAULT_MANAGER


def is_pm_installed(pm: str, timeout: int = DEFAULT_VERSION_TIMEOUT) -> bool:
    """Run `<pm> --version`; any failure means not installed."""
    mgr = get_manager(pm)
    if mgr is None:
        return False

    cmd = mgr.version_args()
    try:
        result = subprocess.run(
            [resolve_executable(cmd[0]), *cmd[1:]],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=timeout,
            check=False,
        )
    except (subprocess.TimeoutExpired, FileNotFoundError, OSError) as e:
        logger.debug(f"{pm} --version failed: {e}")
        return False

    logger.debug(f"{pm} --version exited with code {result.returncode}")
    return result.returncode == 0


def package_manager_choices(
    root: Path, timeout: int = DEFAULT_VERSION_TIMEOUT
) -> tuple[str, list[PackageManagerChoice]]:
    """Detect the project's manager and probe every supported one.

    Returns:
        (detected manager name, choices in display order)
    """
    detected = detect_pm(root)
    choices = [
        PackageManagerChoice(
            name=mgr.manager_name,
            detected=mgr.manager_name == detected,
            installed=is_pm_installed(mgr.manager_name, timeout=timeout),
        )
        for mgr in get_all_managers()
    ]
    return detected, choices


def default_choice_index(choices: list[PackageManagerChoice]) -> int | None:
    """Index to pre-highlight: the detected manager if installed, else the first installed one."""
    for i, choice in enumerate(choices):
        if choice.detected and choice.installed:
            return i
    for i, choice in enumerate(choices):
        if choice.installed:
            return i
    return None
