#!/usr/bin/env python3
"""
Multi-pass compilation of a LaTeX project.

Compilation process:
    1. Run `pdflatex` a first time.
    2. When required, compile the glossary using `makeglossaries`.
    3. When required, compile the bibliography using `biber`.
    4. Run `pdflatex` a second time when either `makeglossaries` or `biber` did run.

The first tool that fails aborts the whole sequence.

NOTE: compiling changes the working directory of the whole process to the
project root, and never restores it. LaTeX resolves `\\include{...}` and
friends against the working directory, not against the file being compiled.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from pypdf import PdfReader
from tqdm import tqdm

from . import config
from .cleaner import clean_output_directory
from .errors import FileSystemError, LatexWizardError
from .locator import find_project_root_directory
from .logs import log_exception, log_info, log_warning
from .scanner import FeatureFlags, scan_main_tex_file
from .toolchain import biber_args, makeglossaries_args, pdflatex_args, run_shell_cmd


# ----------------------------
# Pass Plan
# ----------------------------

@dataclass
class CompilePass:
    executable: str
    args: List[str] = field(default_factory=list)
    message: str = ""


def plan_passes(flags: FeatureFlags) -> List[CompilePass]:
    """Fixed sequence of passes for a document with the given features."""
    passes = [CompilePass(config.PDFLATEX, pdflatex_args())]

    if flags.has_glossary:
        passes.append(CompilePass(
            config.MAKEGLOSSARIES, makeglossaries_args(),
            "Glossary detected. Compiling it.",
        ))
    if flags.has_bibliography:
        passes.append(CompilePass(
            config.BIBER, biber_args(),
            "Bibliography detected. Compiling it.",
        ))
    if flags.needs_second_pass:
        passes.append(CompilePass(
            config.PDFLATEX, pdflatex_args(),
            "Recompiling the `.pdf` to include the newly generated glossary/bibliography.",
        ))

    return passes


# ----------------------------
# Build Steps
# ----------------------------

def _prepare_output_directory(output_directory: Path) -> None:
    if output_directory.exists():
        return
    try:
        output_directory.mkdir()
    except OSError as e:
        raise FileSystemError(f"While creating output directory `{output_directory}`:\n{e}") from e


def _change_working_directory(project_directory: Path) -> None:
    try:
        os.chdir(project_directory)
    except OSError as e:
        log_warning(
            f"Failed to set the current working directory to `{project_directory}`. "
            f"Some LaTeX statements (like `\\include`) might fail to compile.\n{e}"
        )


def count_pdf_pages(pdf: Path) -> Optional[int]:
    """Page count of a compiled document, or None when it can't be read."""
    if not pdf.is_file():
        return None
    try:
        return len(PdfReader(str(pdf)).pages)
    except Exception as e:
        log_warning(f"Could not determine the page count of `{pdf}`: {e}")
        return None


def _report(output_pdf: Path) -> None:
    if not output_pdf.is_file():
        log_warning(f"Compilation finished but `{output_pdf}` is missing.")
        return
    count = count_pdf_pages(output_pdf)
    if count is None:
        log_info(f"Compiled `{output_pdf}`.")
    else:
        log_info(f"Compiled `{output_pdf}` ({count} pages).")


# ----------------------------
# Orchestrator
# ----------------------------

def compile_tex_file(project_directory: Path) -> Path:
    """
    Compile the main `.tex` file of a project into its output directory.

    Args:
        project_directory: Root directory of the project (see
            find_project_root_directory).

    Returns:
        Absolute path of the output `.pdf`.

    Raises:
        FileSystemError: the output directory could not be created or the
            main `.tex` file could not be read.
        ShellCommandError: one of the passes failed.
    """
    project_directory = Path(project_directory)
    output_directory = project_directory / config.OUTPUT_DIRECTORY
    main_tex_file = project_directory / config.MAIN_TEX_FILE
    # Resolved now: relative paths stop being valid after the chdir below
    output_pdf = (output_directory / config.MAIN_PDF_FILE).absolute()

    _prepare_output_directory(output_directory)

    log_info(f"Compiling `{main_tex_file}` to `{output_directory / config.MAIN_PDF_FILE}`.")

    flags = scan_main_tex_file(main_tex_file)

    _change_working_directory(project_directory)

    passes = plan_passes(flags)
    with tqdm(total=len(passes), desc="Compiling", unit="pass", leave=False, disable=None) as progress:
        for step in passes:
            if step.message:
                log_info(step.message)
            progress.set_postfix_str(step.executable)
            run_shell_cmd(step.executable, step.args)
            progress.update()

    _report(output_pdf)
    return output_pdf


def compile_project(proj_name: Optional[str] = None, clean: bool = False) -> Path:
    """
    Locate a project and compile it.

    Args:
        proj_name: Project root, main `.tex` file, or None to search upwards
            from the current directory.
        clean: Delete the byproducts of previous compilations first (the
            output `.pdf` is kept).

    Returns:
        Absolute path of the output `.pdf`.
    """
    proj_dir = find_project_root_directory(proj_name)

    if clean:
        out_dir = proj_dir / config.OUTPUT_DIRECTORY
        out_pdf = out_dir / config.MAIN_PDF_FILE
        # Cleanup is best effort: compile anyway
        try:
            clean_output_directory(out_dir, out_pdf)
        except LatexWizardError as e:
            log_exception(e)

    return compile_tex_file(proj_dir)
