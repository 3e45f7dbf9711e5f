"""Bun package manager implementation."""

from .base import BasePackageManager


class BunPackageManager(BasePackageManager):
    """Bun, identified by its binary lockfile bun.lockb."""

    @property
    def manager_name(self) -> str:
        return "bun"

    @property
    def lockfile(self) -> str:
        return "bun.lockb"

    @property
    def scanner_action(self) -> str:
        return "install"

    def install_args(self) -> list[str]:
        # bun install has no --silent flag
        return [self.manager_name, "install"]
