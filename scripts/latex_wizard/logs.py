#!/usr/bin/env python3
"""
Tagged terminal messages.

Every message is a single line `[TAG] message` written to stdout, where
the tag is coloured by severity. Message bodies are printed as plain text:
compiler output is full of square brackets that rich would otherwise read
as markup.
"""
from rich.console import Console
from rich.text import Text

from .errors import LatexWizardError

# Tag -> rich style
TAG_STYLES = {
    "ERR": "red",
    "WRN": "yellow",
    "INF": "cyan",
    "HLP": "green",
}

console = Console(highlight=False, soft_wrap=True)


def _log(tag: str, message: str) -> None:
    line = Text.assemble("[", (tag, TAG_STYLES.get(tag, "")), "] ", str(message))
    console.print(line)


def log_error(message: str) -> None:
    _log("ERR", message)


def log_warning(message: str) -> None:
    _log("WRN", message)


def log_info(message: str) -> None:
    _log("INF", message)


def log_exception(error: LatexWizardError) -> None:
    """Print an exception with the tag its class declares."""
    _log(error.tag, str(error))
