"""pnpm package manager implementation."""

from .base import BasePackageManager


class PnpmPackageManager(BasePackageManager):
    """pnpm, identified by pnpm-lock.yaml."""

    @property
    def manager_name(self) -> str:
        return "pnpm"

    @property
    def lockfile(self) -> str:
        return "pnpm-lock.yaml"

    @property
    def scanner_action(self) -> str:
        return "add"
