"""Centralized constants for eazypm.

Single source of truth for the file names eazypm reads, writes and moves
inside a project root, and for the environment variables it honors.
"""

# ============================================================================
# PROJECT FILES
# ============================================================================

MANIFEST_FILE = "package.json"
NPM_LOCKFILE = "package-lock.json"

# Files copied into the backup directory (manifest first, then lockfiles)
BACKUP_FILES = (
    "package.json",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "bun.lockb",
)

# Relocated (renamed, not copied) into the backup directory
DEPENDENCY_CACHE_DIR = "node_modules"

# ============================================================================
# OUTPUT
# ============================================================================

INSTALL_COMMAND_FILE = "install-command.txt"
BACKUP_PREFIX = "backup-"

# Per-project config directory (optional)
CONFIG_DIR = ".eazypm"
CONFIG_FILE = "config.json"

# ============================================================================
# SCANNER
# ============================================================================

SCANNER_PREFIX = "aikido-"
SCANNER_BOOTSTRAP_MANAGER = "npm"

# ============================================================================
# ENVIRONMENT VARIABLES
# ============================================================================

ENV_LOG_LEVEL = "EAZYPM_LOG_LEVEL"
ENV_LOG_JSON = "EAZYPM_LOG_JSON"
ENV_LOG_FILE = "EAZYPM_LOG_FILE"
