"""
Command sanitizer.
Recovers a bare shell command line from a model response that may be wrapped
in markdown code decoration.
"""

from dataclasses import dataclass

FENCE = "```"
BACKTICK = "`"
LANGUAGE_TAGS = ("bash\n", "sh\n")


@dataclass(frozen=True)
class SuggestedCommand:
    """A model suggestion: the verbatim response and the command derived from it."""
    raw_text: str
    sanitized_text: str

    @classmethod
    def from_response(cls, raw_text: str) -> "SuggestedCommand":
        return cls(raw_text=raw_text, sanitized_text=sanitize_command(raw_text))


def sanitize_command(raw: str) -> str:
    """
    Strip one layer of enclosing markdown decoration from a model response.

    Rules (first match wins):
      - ```lang ... ``` fences are removed, along with a leading
        ``bash`` or ``sh`` tag line
      - `...` inline code is unwrapped
      - anything else is only trimmed

    Args:
        raw: Verbatim model output

    Returns:
        The command line, trimmed
    """
    cmd = raw.strip()

    if cmd.startswith(FENCE) and cmd.endswith(FENCE):
        cmd = cmd[len(FENCE):]
        if cmd.endswith(FENCE):
            cmd = cmd[:-len(FENCE)]
        for tag in LANGUAGE_TAGS:
            if cmd.startswith(tag):
                cmd = cmd[len(tag):]
                break
        return cmd.strip()

    if cmd.startswith(BACKTICK) and cmd.endswith(BACKTICK):
        return cmd[1:-1].strip()

    return cmd
