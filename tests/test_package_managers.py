"""Tests for the package manager registry and scanner command building."""

import pytest

from eazypm.manifest import Dependency
from eazypm.orchestrator import build_scanner_command
from eazypm.package_managers import get_all_managers, get_manager


class TestScannerCommand:
    """Scanner subcommand is install for npm/bun and add for pnpm/yarn."""

    def test_npm(self):
        cmd = build_scanner_command("npm", [Dependency("a", "1.0.0")])
        assert str(cmd) == "aikido-npm install a@1.0.0"

    def test_yarn(self):
        cmd = build_scanner_command("yarn", [Dependency("a", "1.0.0")])
        assert str(cmd) == "aikido-yarn add a@1.0.0"

    @pytest.mark.parametrize("pm, action", [("pnpm", "add"), ("bun", "install")])
    def test_other_managers(self, pm, action):
        deps = [Dependency("a", "1.0.0"), Dependency("@types/node", "20.1.0")]
        cmd = build_scanner_command(pm, deps)
        assert cmd.argv == [f"aikido-{pm}", action, "a@1.0.0", "@types/node@20.1.0"]

    def test_version_with_spaces_stays_one_argument(self):
        cmd = build_scanner_command("npm", [Dependency("a", ">=1.0 <2")])
        assert cmd.argv == ["aikido-npm", "install", "a@>=1.0 <2"]

    def test_custom_prefix(self):
        cmd = build_scanner_command("npm", [Dependency("a", "1.0.0")], prefix="safe-")
        assert str(cmd) == "safe-npm install a@1.0.0"

    def test_unsupported_manager(self):
        with pytest.raises(ValueError):
            build_scanner_command("pip", [])


class TestRegistry:
    """Per-manager native commands."""

    def test_display_order(self):
        assert [m.manager_name for m in get_all_managers()] == ["npm", "pnpm", "yarn", "bun"]

    def test_lookup_is_case_insensitive(self):
        assert get_manager("PNPM").manager_name == "pnpm"

    def test_unknown(self):
        assert get_manager("cargo") is None

    @pytest.mark.parametrize(
        "pm, expected",
        [
            ("npm", ["npm", "install", "--silent"]),
            ("pnpm", ["pnpm", "install", "--silent"]),
            ("yarn", ["yarn", "install", "--silent"]),
            ("bun", ["bun", "install"]),
        ],
    )
    def test_install_args(self, pm, expected):
        assert get_manager(pm).install_args() == expected

    def test_remove_args(self):
        assert get_manager("yarn").remove_args(["a", "b"]) == ["yarn", "remove", "a", "b"]
