"""
Model logo rendering.

Logos are ASCII-art line lists keyed by model family (e.g. "llama"), read
once from an optional logos.json. Each logo is printed with a vertical
colour gradient. A missing or broken logo file only costs the logo.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from loguru import logger
from rich.color import Color, ColorParseError, blend_rgb
from rich.console import Console
from rich.style import Style
from rich.text import Text

from iashell.config import load_config
from iashell.core.status import StatusReporter

LOGO_FILE_NAME = "logos.json"
DEFAULT_KEY = "default"
FALLBACK_GRADIENT = ("#FFFFFF", "#EAEAEA")


def default_logo_paths(override: Optional[Path] = None) -> List[Path]:
    """Candidate logo files, in lookup order."""
    if override is not None:
        return [override]
    return [Path.cwd() / LOGO_FILE_NAME, Path.home() / ".iashell" / LOGO_FILE_NAME]


def load_logos(paths: Iterable[Path]) -> Tuple[Mapping[str, Tuple[str, ...]], Optional[str]]:
    """
    Load the first logo file that exists.

    Args:
        paths: Candidate files

    Returns:
        (read-only mapping of family -> lines, warning message or None)
    """
    for path in paths:
        if not path.exists():
            continue
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read logos from {path}: {e}")
            return MappingProxyType({}), f"Could not read {path}; skipping logos."

        if not isinstance(data, dict):
            return MappingProxyType({}), f"{path} is not a JSON object; skipping logos."

        logos = {
            str(key).lower(): tuple(str(line) for line in lines)
            for key, lines in data.items()
            if isinstance(lines, list)
        }
        logger.debug(f"Loaded {len(logos)} logos from {path}")
        return MappingProxyType(logos), None

    return MappingProxyType({}), f"{LOGO_FILE_NAME} not found. Skipping logos."


def gradient_colors(start: str, end: str, steps: int) -> List[Color]:
    """
    Colours blended from start to end over `steps` lines.

    A single line gets the end colour.
    """
    start_rgb = Color.parse(start).get_truecolor()
    end_rgb = Color.parse(end).get_truecolor()
    colors = []
    for i in range(steps):
        t = 1.0 if steps <= 1 else i / (steps - 1)
        colors.append(Color.from_triplet(blend_rgb(start_rgb, end_rgb, t)))
    return colors


class LogoRenderer:
    """Prints the logo that matches a model name."""

    def __init__(
        self,
        console: Console,
        logos: Mapping[str, Sequence[str]],
        gradients: Optional[Dict[str, Sequence[str]]] = None,
        clear_enabled: bool = True
    ):
        self.console = console
        self.logos = logos
        self.gradients = gradients if gradients is not None else {}
        self.clear_enabled = clear_enabled

    @classmethod
    def from_config(
        cls,
        console: Console,
        logo_file: Optional[Path] = None,
        err_console: Optional[Console] = None
    ) -> "LogoRenderer":
        """Build a renderer from presentation.yaml and the first logos.json found.

        A missing or unreadable logo file is reported as a warning on `err_console`.
        """
        settings = load_config("presentation")
        logos, warning = load_logos(default_logo_paths(logo_file))
        if warning:
            StatusReporter(console, err_console).warning(warning)
        return cls(
            console=console,
            logos=logos,
            gradients=settings.get("gradients") or {},
            clear_enabled=bool(settings.get("clear_screen", True))
        )

    def logo_key(self, model_name: str) -> str:
        lower_name = model_name.lower()
        for key in self.logos:
            if key in lower_name:
                return key
        return DEFAULT_KEY

    def _gradient_for(self, key: str) -> Tuple[str, str]:
        pair = self.gradients.get(key) or self.gradients.get(DEFAULT_KEY) or FALLBACK_GRADIENT
        if len(pair) < 2:
            return FALLBACK_GRADIENT
        return pair[0], pair[1]

    def render(self, model_name: str) -> None:
        """Print the logo for a model; does nothing when no logo matches."""
        key = self.logo_key(model_name)
        lines = self.logos.get(key)
        if not lines:
            return

        start, end = self._gradient_for(key)
        try:
            colors = gradient_colors(start, end, len(lines))
        except ColorParseError as e:
            logger.warning(f"Bad gradient for '{key}': {e}")
            colors = [None] * len(lines)

        for line, color in zip(lines, colors):
            self.console.print(Text(line, style=Style(color=color)))

    def clear(self) -> None:
        if self.clear_enabled:
            self.console.clear()
