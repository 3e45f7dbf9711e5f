"""Package managers module - one registry entry per supported JavaScript manager.

Two orders matter and are kept separate:
- DISPLAY_ORDER: how managers are listed in the selection prompt
- DETECTION_ORDER: which lockfile wins when a project has several

Usage:
    from eazypm.package_managers import get_manager, get_all_managers

    pnpm = get_manager("pnpm")
    argv = pnpm.scanner_args(deps)

    for mgr in get_all_managers():
        print(f"{mgr.manager_name}: {mgr.lockfile}")
"""

from __future__ import annotations

from .base import BasePackageManager

DISPLAY_ORDER = ("npm", "pnpm", "yarn", "bun")
DETECTION_ORDER = ("pnpm", "yarn", "npm", "bun")
DEFAULT_MANAGER = "npm"

# Populated on first lookup
_REGISTRY: dict[str, type[BasePackageManager]] | None = None


def _init_registry() -> dict[str, type[BasePackageManager]]:
    """Initialize the registry with all package manager implementations."""
    global _REGISTRY
    if _REGISTRY is not None:
        return _REGISTRY

    from .bun import BunPackageManager
    from .npm import NpmPackageManager
    from .pnpm import PnpmPackageManager
    from .yarn import YarnPackageManager

    _REGISTRY = {
        "npm": NpmPackageManager,
        "pnpm": PnpmPackageManager,
        "yarn": YarnPackageManager,
        "bun": BunPackageManager,
    }
    return _REGISTRY


def get_manager(manager_name: str) -> BasePackageManager | None:
    """Get package manager instance by name.

    Args:
        manager_name: The manager identifier (e.g., 'npm', 'yarn')

    Returns:
        Package manager instance or None if not supported
    """
    registry = _init_registry()
    cls = registry.get(manager_name.lower())
    return cls() if cls else None


def get_all_managers() -> list[BasePackageManager]:
    """Get all registered package managers in display order."""
    registry = _init_registry()
    return [registry[name]() for name in DISPLAY_ORDER]


__all__ = [
    "DEFAULT_MANAGER",
    "DETECTION_ORDER",
    "DISPLAY_ORDER",
    "get_manager",
    "get_all_managers",
    "BasePackageManager",
]
