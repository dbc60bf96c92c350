#!/usr/bin/env python3
"""
latex-wizard: LaTeX Project Manager
===================================

Scaffolds new LaTeX projects and compiles existing ones by driving
pdflatex, makeglossaries and biber in the right order.

Modules:
    - config: Project layout and toolchain constants
    - errors: Exception hierarchy (one class per error kind)
    - logs: Tagged, coloured terminal messages
    - locator: Project root resolution
    - scanner: Glossary/bibliography detection in main.tex
    - cleaner: Output directory cleanup
    - toolchain: External process execution
    - compiler: Multi-pass compilation pipeline
    - scaffold: New project scaffolding
    - cli: Command-line entry point

Usage:
    from latex_wizard import compile_project
    compile_project("thesis", clean=True)

    # Or from the shell:
    latex-wizard init thesis
    latex-wizard compile thesis --clean
"""

__version__ = "0.1.0"
__author__ = "Daniele Monzani"


from .config import (
    MAIN_TEX_FILE,
    MAIN_PDF_FILE,
    OUTPUT_DIRECTORY,
)

from .errors import (
    LatexWizardError,
    HelpMessage,
    InvalidCommandLineArgument,
    FileSystemError,
    ShellCommandError,
    CommandSpawnError,
    CommandFailedError,
)

from .locator import (
    find_project_root_directory,
)

from .scanner import (
    FeatureFlags,
    scan_main_tex_file,
)

from .cleaner import (
    clean_output_directory,
)

from .toolchain import (
    run_shell_cmd,
)

from .compiler import (
    compile_project,
    compile_tex_file,
)

from .scaffold import (
    init_project,
)

from .cli import (
    main,
)


__all__ = [
    # Entry points
    'main',
    'compile_project',
    'compile_tex_file',
    'init_project',
    # Config
    'MAIN_TEX_FILE',
    'MAIN_PDF_FILE',
    'OUTPUT_DIRECTORY',
    # Errors
    'LatexWizardError',
    'HelpMessage',
    'InvalidCommandLineArgument',
    'FileSystemError',
    'ShellCommandError',
    'CommandSpawnError',
    'CommandFailedError',
    # Pipeline pieces
    'find_project_root_directory',
    'FeatureFlags',
    'scan_main_tex_file',
    'clean_output_directory',
    'run_shell_cmd',
]
