#!/usr/bin/env python3
"""
External process execution.

Every tool runs to completion (no timeout): pdflatex is called with
-halt-on-error, so it stops on its own when the document is broken.
Output is captured rather than streamed and only shown on failure.
"""
import shlex
import subprocess
from pathlib import Path
from typing import List, Sequence, Union

from . import config
from .errors import CommandFailedError, CommandSpawnError
from .logs import log_info

PathLike = Union[str, Path]


# ----------------------------
# Command Lines
# ----------------------------

def pdflatex_args(output_directory: PathLike = config.OUTPUT_DIRECTORY,
                  main_tex_file: PathLike = config.MAIN_TEX_FILE) -> List[str]:
    return config.PDFLATEX_FLAGS + ["-output-directory", str(output_directory), str(main_tex_file)]


def makeglossaries_args(output_directory: PathLike = config.OUTPUT_DIRECTORY,
                        jobname: str = config.MAIN_FILE_NAME) -> List[str]:
    return ["-d", str(output_directory), jobname]


def biber_args(output_directory: PathLike = config.OUTPUT_DIRECTORY,
               jobname: str = config.MAIN_FILE_NAME) -> List[str]:
    # biber reads the .bcf and writes the .bbl next to the other byproducts
    return [
        "--input-directory", str(output_directory),
        "--output-directory", str(output_directory),
        jobname,
    ]


def git_init_args(directory: PathLike) -> List[str]:
    return ["init", str(directory)]


# ----------------------------
# Process Execution
# ----------------------------

def run_shell_cmd(executable: str, args: Sequence[str] = ()) -> subprocess.CompletedProcess:
    """
    Run an external tool and wait for it to exit.

    Raises:
        CommandSpawnError: the tool could not be started.
        CommandFailedError: the tool exited with a non-zero code. The
            captured stdout/stderr are part of the error.
    """
    cmd = [executable, *args]
    log_info(f"[EXEC] {shlex.join(cmd)}")

    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        raise CommandSpawnError(f"Failed to spawn command `{executable}`:\n{e}", executable) from e

    if proc.returncode != 0:
        raise CommandFailedError(executable, proc.returncode, proc.stdout, proc.stderr)

    return proc
