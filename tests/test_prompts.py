"""Tests for the interactive prompts and spinner renderer."""

import io

import pytest
from rich.console import Console

from eazypm.detector import PackageManagerChoice
from eazypm.pipeline import prompts
from eazypm.pipeline.renderer import SpinnerRenderer


@pytest.fixture
def choices():
    return [
        PackageManagerChoice("npm", detected=False, installed=True),
        PackageManagerChoice("pnpm", detected=False, installed=False),
        PackageManagerChoice("yarn", detected=True, installed=True),
        PackageManagerChoice("bun", detected=False, installed=True),
    ]


def _script_keys(monkeypatch, keys):
    keys = iter(keys)
    monkeypatch.setattr(prompts, "get_key", lambda: next(keys))


class TestNavigation:
    """Disabled entries are skipped in both directions."""

    def test_down_skips_disabled(self, choices):
        assert prompts.next_enabled(choices, 0, 1) == 2

    def test_up_wraps_and_skips_disabled(self, choices):
        assert prompts.next_enabled(choices, 2, -1) == 0
        assert prompts.next_enabled(choices, 0, -1) == 3

    def test_nothing_enabled_stays_put(self):
        disabled = [PackageManagerChoice("npm", detected=True, installed=False)]
        assert prompts.next_enabled(disabled, 0, 1) == 0


class TestSelect:
    """Arrow-key selection."""

    def test_enter_accepts_default(self, monkeypatch, choices):
        _script_keys(monkeypatch, ["enter"])
        assert prompts.select_package_manager(choices, 2) == "yarn"

    def test_arrows_then_enter(self, monkeypatch, choices):
        _script_keys(monkeypatch, ["down", "down", "x", "enter"])
        assert prompts.select_package_manager(choices, 0) == "bun"

    def test_ctrl_c_propagates(self, monkeypatch, choices):
        def interrupt():
            raise KeyboardInterrupt

        monkeypatch.setattr(prompts, "get_key", interrupt)
        with pytest.raises(KeyboardInterrupt):
            prompts.select_package_manager(choices, 0)


class TestConfirm:
    def test_default_is_yes(self, monkeypatch):
        captured = {}

        def fake_confirm(text, default):
            captured.update(text=text, default=default)
            return default

        monkeypatch.setattr(prompts.click, "confirm", fake_confirm)
        assert prompts.confirm_run() is True
        assert captured["default"] is True
        assert "backup" in captured["text"]


class TestSpinnerRenderer:
    """Non-TTY rendering prints only final results."""

    def test_succeed_and_fail(self):
        out = io.StringIO()
        spinner = SpinnerRenderer("Working", console=Console(file=out, width=120))

        with spinner:
            spinner.on_step_start("Removing existing packages", 1, 3)
        spinner.succeed("done")
        spinner.fail("broken")

        assert spinner.text == "Removing existing packages"
        assert "[OK] done" in out.getvalue()
        assert "[FAILED] broken" in out.getvalue()

    def test_step_events(self):
        out = io.StringIO()
        spinner = SpinnerRenderer("Working", console=Console(file=out, width=120))

        with spinner:
            spinner.on_step_start("Removing existing packages", 1, 3)
            spinner.on_step_complete("Removing existing packages", 1.5)
            spinner.on_step_start("Reinstalling", 2, 3)
            spinner.on_step_failed("Reinstalling", "npm exited with code 1", 1)

        assert "[1/3] Removing existing packages (1.5s)" in out.getvalue()
        assert "[2/3]" not in out.getvalue()
        assert "npm exited with code 1" not in out.getvalue()

    def test_results_are_printed_literally(self):
        out = io.StringIO()
        spinner = SpinnerRenderer("Working", console=Console(file=out, width=120))

        spinner.fail("could not write /tmp/x[/]y/install-command.txt")

        assert "[FAILED] could not write /tmp/x[/]y/install-command.txt" in out.getvalue()
