#!/usr/bin/env python3
"""
latex-wizard CLI
================

Scaffolds and compiles LaTeX projects without installing the package.

Usage:
    python scripts/run_latex_wizard.py init thesis
    python scripts/run_latex_wizard.py compile thesis --clean
    python scripts/run_latex_wizard.py compile           # From inside a project

Compilation:
    - pdflatex (always)
    - makeglossaries (when main.tex loads glossaries)
    - biber (when main.tex loads biblatex, bibtex or natbib)
    - pdflatex again (after makeglossaries/biber)
"""

import sys
import os

# Ensure the scripts directory is in the path
script_dir = os.path.dirname(os.path.abspath(__file__))
if script_dir not in sys.path:
    sys.path.insert(0, script_dir)


def main():
    """Main entry point for the CLI."""
    from latex_wizard import main as run
    return run()


if __name__ == "__main__":
    sys.exit(main())
