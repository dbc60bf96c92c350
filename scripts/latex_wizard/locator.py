#!/usr/bin/env python3
"""
Project root resolution.

The project root is the directory that holds the main `.tex` file as a
direct child. It is found either from an explicit reference (the root
directory itself, or the main `.tex` file) or by walking up from the
current working directory.
"""
from pathlib import Path
from typing import Optional

from .config import MAIN_TEX_FILE
from .errors import FileSystemError, InvalidCommandLineArgument


def _contains_main_tex_file(directory: Path) -> bool:
    return (directory / MAIN_TEX_FILE).is_file()


def _inspect_error(path: Path, e: OSError) -> FileSystemError:
    return FileSystemError(f"While looking for `{MAIN_TEX_FILE}` file: failed to inspect `{path}`.\n{e}")


def _search_upwards() -> Path:
    """Check the current directory, then every parent up to the root of the system."""
    try:
        current_directory = Path.cwd()
    except OSError as e:
        raise FileSystemError(
            f"While looking for `{MAIN_TEX_FILE}` file: failed to get current directory.\n{e}"
        ) from e

    try:
        while not _contains_main_tex_file(current_directory):
            parent = current_directory.parent
            # The parent of "/" is "/" itself
            if parent == current_directory:
                raise InvalidCommandLineArgument(
                    f"Can't find file `{MAIN_TEX_FILE}` neither in the current directory, "
                    f"nor in any parent directory."
                )
            current_directory = parent
    except OSError as e:
        raise _inspect_error(current_directory, e) from e

    return current_directory


def _resolve_reference(path: Path) -> Path:
    if not path.exists():
        raise InvalidCommandLineArgument(f"File or directory `{path}` doesn't exist.")

    if path.is_file():
        if path.name != MAIN_TEX_FILE:
            raise InvalidCommandLineArgument(
                f"Invalid file name `{path}`. Only the main `.tex` file (`{MAIN_TEX_FILE}`) can be compiled."
            )
        # Path("main.tex").parent is Path("."), never an empty path
        return path.parent

    if path.is_dir():
        if not _contains_main_tex_file(path):
            raise InvalidCommandLineArgument(
                f"Failed to find the main `.tex` file (`{MAIN_TEX_FILE}`) inside `{path}`."
            )
        return path

    raise InvalidCommandLineArgument(
        f"File `{path}` should be either the root directory of the project "
        f"or the main `.tex` file (`{MAIN_TEX_FILE}`)"
    )


def find_project_root_directory(proj_name: Optional[str] = None) -> Path:
    """
    Resolve the root directory of a project.

    Args:
        proj_name: Path to the project root or to its main `.tex` file.
                   When None, the current directory and all of its parents
                   are searched.

    Returns:
        The directory containing the main `.tex` file. A bare `main.tex`
        argument resolves to `.`.

    Raises:
        InvalidCommandLineArgument: the reference does not point to a project.
        FileSystemError: the current directory could not be determined, or
            a path could not be inspected (name too long, permission denied).
    """
    if proj_name is None:
        return _search_upwards()

    path = Path(proj_name)
    try:
        return _resolve_reference(path)
    except OSError as e:
        raise _inspect_error(path, e) from e
