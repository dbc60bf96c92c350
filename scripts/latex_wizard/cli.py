#!/usr/bin/env python3
"""
Command-line entry point.

Usage:
    latex-wizard init <project>
    latex-wizard compile [project] [-c|--clean]
"""
import argparse
from typing import List, Optional

from . import config
from .compiler import compile_project
from .errors import HelpMessage, InvalidCommandLineArgument, LatexWizardError
from .scaffold import init_project
from .logs import log_exception


class WizardArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str):
        raise InvalidCommandLineArgument(f"{message}\n\n{self.format_usage().rstrip()}")

    def print_help(self, file=None):
        raise HelpMessage(self.format_help().rstrip())


def build_parser() -> argparse.ArgumentParser:
    parser = WizardArgumentParser(
        prog=config.APP,
        description=config.DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
    {config.APP} init thesis              # New project in ./thesis
    {config.APP} compile thesis --clean   # Fresh build of thesis/{config.MAIN_TEX_FILE}
    {config.APP} compile                  # Build the project containing the current directory
        """,
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # Init subcommand
    p_init = subparsers.add_parser("init", help="Start a new LaTeX project",
                                   description="Start a new LaTeX project")
    p_init.add_argument("project", help="Name of the LaTeX project to initialize")

    # Compile subcommand
    p_compile = subparsers.add_parser("compile", help="Compile a LaTeX project",
                                      description="Compile a LaTeX project")
    p_compile.add_argument(
        "project",
        nargs="?",
        default=None,
        help=f"Root directory of the project or its main `.tex` file ({config.MAIN_TEX_FILE}). "
             f"Defaults to the closest parent directory containing {config.MAIN_TEX_FILE}",
    )
    p_compile.add_argument(
        "-c", "--clean",
        action="store_true",
        help="Start the compilation from scratch, by deleting the output of previous compilations",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)

        if args.command == "init":
            init_project(args.project)
        elif args.command == "compile":
            compile_project(args.project, clean=args.clean)

    except HelpMessage as e:
        log_exception(e)
        return 0
    except LatexWizardError as e:
        log_exception(e)
        return 1

    return 0

