"""Exception types raised inside eazypm.

Only ManifestError escapes to the CLI as a precondition failure. The
orchestrator converts BackupError into a failed StepResult.
"""


class EazypmError(Exception):
    """Base class for all eazypm errors."""


class ManifestError(EazypmError):
    """package.json exists but cannot be read or parsed."""


class BackupError(EazypmError):
    """Backup directory could not be created or populated."""

