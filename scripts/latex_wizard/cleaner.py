#!/usr/bin/env python3
"""
Output directory cleanup for clean builds.
"""
from pathlib import Path

from .errors import FileSystemError
from .logs import log_error, log_info, log_warning


def clean_output_directory(output_directory: Path, output_pdf: Path) -> None:
    """
    Remove every file in the output directory except the output `.pdf`.

    The `.pdf` is kept so that a failed rebuild still leaves the last good
    document around. Sub-directories are left untouched. A file that cannot
    be removed is reported and skipped.

    Raises:
        FileSystemError: the content of the directory could not be listed.
    """
    output_directory = Path(output_directory)
    keep_name = Path(output_pdf).name

    if not output_directory.exists():
        log_info(f"The output directory `{output_directory}` is missing already. No file was removed.")
        return

    try:
        entries = sorted(output_directory.iterdir())
    except OSError as e:
        raise FileSystemError(
            f"An error occurred while reading the content of directory `{output_directory}`:\n{e}"
        ) from e

    files_to_remove = [p for p in entries if p.is_file() and p.name != keep_name]

    for file in files_to_remove:
        log_warning(f"Removing `{file}`")
        try:
            file.unlink()
        except OSError as e:
            log_error(f"An error occurred while removing file `{file}`:\n{e}")
