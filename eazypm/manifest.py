"""Dependency reader for package.json and package-lock.json.

Only the subset eazypm consumes is modelled: name -> version maps from the
manifest's dependencies/devDependencies and the lockfile's top-level
dependencies section. Anything else in either document is ignored.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from eazypm.exceptions import ManifestError
from eazypm.utils.constants import MANIFEST_FILE, NPM_LOCKFILE
from eazypm.utils.logging import logger


@dataclass(frozen=True)
class Dependency:
    """A single package to reinstall."""

    name: str
    version: str

    @property
    def spec(self) -> str:
        """Install token in name@version form."""
        return f"{self.name}@{self.version}"

    def __str__(self) -> str:
        return self.spec


def _string_map(section: Any) -> dict[str, str]:
    """Keep only string -> string entries of a mapping section."""
    if not isinstance(section, dict):
        return {}
    return {
        name: version
        for name, version in section.items()
        if isinstance(name, str) and isinstance(version, str)
    }


@dataclass
class PackageManifest:
    """The dependency sections of package.json."""

    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> PackageManifest:
        if not isinstance(data, dict):
            return cls()
        return cls(
            dependencies=_string_map(data.get("dependencies")),
            dev_dependencies=_string_map(data.get("devDependencies")),
        )

    def merged(self) -> dict[str, str]:
        """dependencies then devDependencies; a dev entry wins on duplicate names."""
        return {**self.dependencies, **self.dev_dependencies}


@dataclass
class LockfileSnapshot:
    """Resolved versions from the top-level dependencies of package-lock.json."""

    versions: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> LockfileSnapshot:
        if not isinstance(data, dict):
            return cls()
        section = data.get("dependencies")
        if not isinstance(section, dict):
            return cls()

        versions = {}
        for name, info in section.items():
            if not isinstance(info, dict):
                continue
            version = info.get("version")
            if isinstance(version, str) and version:
                versions[name] = version
        return cls(versions=versions)


def load_manifest(root: Path) -> PackageManifest | None:
    """Parse package.json under root.

    Returns:
        The manifest, or None when the file does not exist

    Raises:
        ManifestError: If the file exists but is not readable JSON
    """
    path = Path(root) / MANIFEST_FILE
    if not path.exists():
        return None

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (ValueError, RecursionError, OSError) as e:
        raise ManifestError(f"Could not read {path}: {e}") from e

    return PackageManifest.from_dict(data)


def load_lockfile(root: Path) -> LockfileSnapshot | None:
    """Best-effort parse of package-lock.json; None when absent or unusable."""
    path = Path(root) / NPM_LOCKFILE
    if not path.exists():
        return None

    try:
        with open(path, encoding="utf-8") as f:
            return LockfileSnapshot.from_dict(json.load(f))
    except (ValueError, RecursionError, OSError) as e:
        logger.debug(f"Ignoring unreadable lockfile {path}: {e}")
        return None


def read_dependencies(root: Path) -> list[Dependency]:
    """Read the dependencies to reinstall from package.json and package-lock.json.

    Manifest entries keep their declaration order with lockfile versions
    applied; names only present in the lockfile are appended after them.
    A missing manifest yields an empty list.
    """
    manifest = load_manifest(root)
    if manifest is None:
        logger.debug(f"No {MANIFEST_FILE} in {root}")
        return []

    versions = manifest.merged()

    lock = load_lockfile(root)
    if lock is not None:
        for name, version in lock.versions.items():
            versions[name] = version

    deps = [Dependency(name, version) for name, version in versions.items()]
    logger.debug(f"Read {len(deps)} dependencies from {root}")
    return deps


def read_declared_names(root: Path) -> list[str]:
    """Names in the manifest's dependencies section, read fresh from disk."""
    manifest = load_manifest(root)
    if manifest is None:
        return []
    return list(manifest.dependencies)
