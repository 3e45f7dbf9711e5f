"""eazypm utilities package."""

from .constants import (
    BACKUP_FILES,
    DEPENDENCY_CACHE_DIR,
    INSTALL_COMMAND_FILE,
    MANIFEST_FILE,
    NPM_LOCKFILE,
)
from .error_handler import handle_exceptions
from .exit_codes import ExitCodes
from .logging import logger

__all__ = [
    "BACKUP_FILES",
    "DEPENDENCY_CACHE_DIR",
    "INSTALL_COMMAND_FILE",
    "MANIFEST_FILE",
    "NPM_LOCKFILE",
    "handle_exceptions",
    "ExitCodes",
    "logger",
]
