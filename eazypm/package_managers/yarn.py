"""Yarn package manager implementation."""

from .base import BasePackageManager


class YarnPackageManager(BasePackageManager):
    """Yarn, identified by yarn.lock."""

    @property
    def manager_name(self) -> str:
        return "yarn"

    @property
    def lockfile(self) -> str:
        return "yarn.lock"

    @property
    def scanner_action(self) -> str:
        return "add"
