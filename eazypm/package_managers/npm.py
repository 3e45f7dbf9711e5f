"""npm package manager implementation."""

from .base import BasePackageManager


class NpmPackageManager(BasePackageManager):
    """npm - the default when no lockfile is found."""

    @property
    def manager_name(self) -> str:
        return "npm"

    @property
    def lockfile(self) -> str:
        return "package-lock.json"

    @property
    def scanner_action(self) -> str:
        return "install"
