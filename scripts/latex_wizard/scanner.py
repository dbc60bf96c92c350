#!/usr/bin/env python3
"""
Detection of glossary and bibliography packages in the main `.tex` file.

Known gaps, kept on purpose since they decide which passes run:
    1. Packages loaded by secondary files (\\input, \\include) are missed.
    2. Options with nested square brackets are not matched:
           \\usepackage[opt=\\cmd{y}]{biblatex}      % detected
           \\usepackage[opt=\\cmd[x]{y}]{biblatex}   % missed
"""
import re
from dataclasses import dataclass
from pathlib import Path

from .errors import FileSystemError

GLOSSARY_PATTERN = re.compile(r"\\usepackage(?:\[[^\[\]]*\])?\{glossaries\}")
BIBLIOGRAPHY_PATTERN = re.compile(r"\\usepackage(?:\[[^\[\]]*\])?\{(?:biblatex|bibtex|natbib)\}")


@dataclass(frozen=True)
class FeatureFlags:
    has_glossary: bool = False
    has_bibliography: bool = False

    @property
    def needs_second_pass(self) -> bool:
        return self.has_glossary or self.has_bibliography


def has_glossary(content: str) -> bool:
    return GLOSSARY_PATTERN.search(content) is not None


def has_bibliography(content: str) -> bool:
    return BIBLIOGRAPHY_PATTERN.search(content) is not None


def scan_main_tex_file(main_tex_file: Path) -> FeatureFlags:
    """Read the main `.tex` file and check whether there is a glossary and/or a bibliography."""
    try:
        content = Path(main_tex_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileSystemError(
            f"Failed to read the content of `{main_tex_file}`. "
            f"Unable to determine the presence of glossary and/or bibliography.\n{e}"
        ) from e

    return FeatureFlags(
        has_glossary=has_glossary(content),
        has_bibliography=has_bibliography(content),
    )
