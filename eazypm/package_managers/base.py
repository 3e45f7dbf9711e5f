"""Abstract base class for package manager implementations.

Each supported JavaScript package manager describes the facts eazypm needs
to drive it: the lockfile that identifies it, the native command lines for
removing and installing packages, and how its safe-chain scanner wrapper is
invoked.
"""

from abc import ABC, abstractmethod

from eazypm.manifest import Dependency
from eazypm.utils.constants import SCANNER_PREFIX


class BasePackageManager(ABC):
    """Abstract base class for all package manager implementations.

    Implementations must provide:
    - manager_name: Binary name and identifier (e.g., 'npm', 'pnpm')
    - lockfile: Lockfile name whose presence marks the project as using it
    - scanner_action: Scanner subcommand used to install packages
    """

    @property
    @abstractmethod
    def manager_name(self) -> str:
        """Return manager identifier, which is also its binary name."""
        ...

    @property
    @abstractmethod
    def lockfile(self) -> str:
        """Return the lockfile name (e.g., 'pnpm-lock.yaml')."""
        ...

    @property
    @abstractmethod
    def scanner_action(self) -> str:
        """Return the scanner subcommand ('install' or 'add')."""
        ...

    def version_args(self) -> list[str]:
        """Command that succeeds only when the manager is installed."""
        return [self.manager_name, "--version"]

    def remove_args(self, names: list[str]) -> list[str]:
        """Command removing the named packages from the project."""
        return [self.manager_name, "remove", *names]

    def install_args(self) -> list[str]:
        """Command running a plain install from the manifest."""
        return [self.manager_name, "install", "--silent"]

    def scanner_binary(self, prefix: str = SCANNER_PREFIX) -> str:
        """Return the safe-chain wrapper binary for this manager."""
        return f"{prefix}{self.manager_name}"

    def scanner_args(self, deps: list[Dependency], prefix: str = SCANNER_PREFIX) -> list[str]:
        """Command installing every dependency through the scanner."""
        return [
            self.scanner_binary(prefix),
            self.scanner_action,
            *(dep.spec for dep in deps),
        ]

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<{self.__class__.__name__} manager_name={self.manager_name!r}>"
