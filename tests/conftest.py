"""Pytest configuration and fixtures."""
import json
import subprocess

import pytest


class FakeSubprocess:
    """Stand-in for subprocess.run that records argv and returns scripted exit codes.

    exit_codes maps a command prefix ("npm remove") to the exit code it returns;
    binaries in missing raise FileNotFoundError like an absent executable.
    """

    def __init__(self):
        self.calls: list[list[str]] = []
        self.kwargs: list[dict] = []
        self.exit_codes: dict[str, int] = {}
        self.missing: set[str] = set()
        self.interrupt_on: str | None = None

    def __call__(self, cmd, **kwargs):
        cmd = list(cmd)
        self.calls.append(cmd)
        self.kwargs.append(kwargs)
        joined = " ".join(cmd)

        if cmd[0] in self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        if self.interrupt_on and joined.startswith(self.interrupt_on):
            raise KeyboardInterrupt
        for prefix, code in self.exit_codes.items():
            if joined.startswith(prefix):
                return subprocess.CompletedProcess(cmd, code)
        return subprocess.CompletedProcess(cmd, 0)

    def joined(self) -> list[str]:
        return [" ".join(c) for c in self.calls]


@pytest.fixture
def fake_run(monkeypatch):
    """Replace subprocess.run for runner and detector; binaries resolve to bare names."""
    fake = FakeSubprocess()
    monkeypatch.setattr("eazypm.runner.shutil.which", lambda name: None)
    monkeypatch.setattr("eazypm.runner.subprocess.run", fake)
    return fake


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def project(tmp_path):
    """Minimal npm project with one runtime and one dev dependency."""
    write_json(
        tmp_path / "package.json",
        {
            "name": "demo",
            "dependencies": {"a": "1.0.0"},
            "devDependencies": {"b": "2.0.0"},
        },
    )
    return tmp_path
