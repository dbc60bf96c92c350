#!/usr/bin/env python3
"""
Exceptions raised by latex-wizard.

Every exception carries the severity tag it is reported with, so the CLI
can print any of them the same way.
"""
from typing import Optional


class LatexWizardError(Exception):
    """Base class for every error reported to the user."""

    tag = "ERR"


class HelpMessage(LatexWizardError):
    """Usage text was requested. Not a failure: the CLI exits with 0."""

    tag = "HLP"


class InvalidCommandLineArgument(LatexWizardError):
    """The command line (or the project reference in it) is not usable."""


class FileSystemError(LatexWizardError):
    """Reading, writing, listing or creating a path failed."""


class ShellCommandError(LatexWizardError):
    """An external tool could not be run successfully."""


class CommandSpawnError(ShellCommandError):
    """The external tool could not be started at all."""

    def __init__(self, message: str, executable: str):
        super().__init__(message)
        self.executable = executable


class CommandFailedError(ShellCommandError):
    """The external tool ran but exited with a non-zero code."""

    def __init__(self, executable: str, returncode: Optional[int], stdout: str = "", stderr: str = ""):
        self.executable = executable
        self.returncode = -1 if returncode is None else returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"Command `{executable}` failed with exit code {self.returncode}.\n{stdout}\n{stderr}"
        )
