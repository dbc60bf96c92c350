#!/usr/bin/env python3
"""
latex-wizard configuration.
Project layout and toolchain constants shared across all modules.
"""
from pathlib import Path

# --- APPLICATION ---
APP = "latex-wizard"
DESCRIPTION = "Tool to manage LaTeX projects"

# --- PROJECT STRUCTURE ---
MAIN_TEX_FILE = "main.tex"
MAIN_FILE_NAME = Path(MAIN_TEX_FILE).stem  # Job name passed to makeglossaries/biber
MAIN_PDF_FILE = f"{MAIN_FILE_NAME}.pdf"
OUTPUT_DIRECTORY = "out"
GITIGNORE_FILE = ".gitignore"

# --- TOOLCHAIN (must be on PATH) ---
PDFLATEX = "pdflatex"
MAKEGLOSSARIES = "makeglossaries"
BIBER = "biber"
GIT = "git"

# NOTE: pdflatex flags take a single hyphen (see `man pdflatex`)
PDFLATEX_FLAGS = ["-halt-on-error"]
