import os
import subprocess
from pathlib import Path

import pytest

from latex_wizard import compiler, scaffold
from latex_wizard.errors import CommandFailedError


@pytest.fixture(autouse=True)
def restore_cwd(monkeypatch):
    # Compiling chdirs into the project root; put the test process back afterwards
    monkeypatch.chdir(os.getcwd())


@pytest.fixture
def make_project(tmp_path):
    """Create <tmp_path>/<name>/main.tex with the given content (and optional out/ files)."""
    def _make(name="proj", content="\\documentclass{article}\n", out_files=()):
        root = tmp_path / name
        root.mkdir(parents=True)
        (root / "main.tex").write_text(content, encoding="utf-8")
        if out_files:
            out = root / "out"
            out.mkdir()
            for f in out_files:
                (out / f).write_text("x", encoding="utf-8")
        return root
    return _make


class ShellRecorder:
    """Stands in for run_shell_cmd: records every call instead of spawning a process."""

    def __init__(self):
        self.calls = []
        self.cwds = []
        self.fail_on = None
        self.on_call = None

    def __call__(self, executable, args=()):
        self.calls.append((executable, list(args)))
        self.cwds.append(Path.cwd())
        if self.on_call:
            self.on_call(executable, list(args))
        if executable == self.fail_on:
            raise CommandFailedError(executable, 1, "stdout text", "stderr text")
        return subprocess.CompletedProcess([executable, *args], 0, "", "")

    @property
    def executables(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def shell(monkeypatch):
    recorder = ShellRecorder()
    monkeypatch.setattr(compiler, "run_shell_cmd", recorder)
    monkeypatch.setattr(scaffold, "run_shell_cmd", recorder)
    return recorder
