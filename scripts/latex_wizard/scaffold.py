#!/usr/bin/env python3
"""
New project scaffolding.

    <name>/
        out/
        main.tex
        .gitignore

followed by `git init <name>`.
"""
from pathlib import Path

from . import config
from .errors import FileSystemError, InvalidCommandLineArgument
from .logs import log_info
from .templates import GITIGNORE_TEMPLATE, MAIN_TEX_TEMPLATE
from .toolchain import git_init_args, run_shell_cmd


def _make_dir(path: Path) -> None:
    try:
        path.mkdir()
    except OSError as e:
        raise FileSystemError(f"While creating directory `{path}`:\n{e}") from e


def _write_file(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"While creating file `{path}`:\n{e}") from e


def init_project(proj_name: str) -> Path:
    """Create a new project directory and turn it into a git repository."""
    if not proj_name or not proj_name.strip():
        raise InvalidCommandLineArgument("The name of the project can't be empty.")

    proj_dir = Path(proj_name)

    _make_dir(proj_dir)
    _make_dir(proj_dir / config.OUTPUT_DIRECTORY)
    _write_file(proj_dir / config.MAIN_TEX_FILE, MAIN_TEX_TEMPLATE)
    _write_file(proj_dir / config.GITIGNORE_FILE, GITIGNORE_TEMPLATE)

    run_shell_cmd(config.GIT, git_init_args(proj_dir))

    log_info(f"Initialized LaTeX project `{proj_dir}`.")
    return proj_dir
