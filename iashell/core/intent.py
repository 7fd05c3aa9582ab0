"""
Input classification for the interactive loop.

Every non-blank line is turned into a ParsedInput before any handler runs,
so routing can be tested without a terminal.
"""

from dataclasses import dataclass
from enum import Enum

TRANSLATE_PREFIX = "//"
RESELECT_MARKER = "//model"
DISABLE_AUTO_MARKER = "//ask"
CD_COMMAND = "cd"
HOME_ALIASES = ("", "~")


class Intent(Enum):
    """What the user asked the shell to do."""
    DIRECTORY_CHANGE = "directory_change"
    RESELECT = "reselect"
    DISABLE_AUTO = "disable_auto"
    TRANSLATE = "translate"
    RAW_EXEC = "raw_exec"


@dataclass(frozen=True)
class ParsedInput:
    """
    A classified input line.

    Attributes:
        intent: Which handler should run
        argument: The directory for DIRECTORY_CHANGE, the natural-language
            request for TRANSLATE, the full line for RAW_EXEC, empty otherwise
    """
    intent: Intent
    argument: str = ""


def classify(line: str) -> ParsedInput:
    """
    Classify one line of user input. First matching rule wins.

    Args:
        line: Raw input line (it is trimmed here)

    Returns:
        ParsedInput for the line
    """
    text = line.strip()

    if text == CD_COMMAND or text.startswith(CD_COMMAND + " "):
        return ParsedInput(Intent.DIRECTORY_CHANGE, text[len(CD_COMMAND):].strip())

    if text == RESELECT_MARKER:
        return ParsedInput(Intent.RESELECT)

    if text == DISABLE_AUTO_MARKER:
        return ParsedInput(Intent.DISABLE_AUTO)

    if text.startswith(TRANSLATE_PREFIX):
        return ParsedInput(Intent.TRANSLATE, text[len(TRANSLATE_PREFIX):].strip())

    return ParsedInput(Intent.RAW_EXEC, text)


def resolves_to_home(target: str) -> bool:
    """Whether a cd argument means the home directory."""
    return target in HOME_ALIASES
