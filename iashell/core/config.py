"""
Configuration management for iashell.
Loads settings from environment variables and .env file.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

STATE_DIR = Path.home() / ".iashell"

# Load environment variables from .env file
# Try multiple locations: current directory, then the user state directory
_possible_env_paths = [
    Path.cwd() / ".env",
    STATE_DIR / ".env",
]
for _env_path in _possible_env_paths:
    if _env_path.exists():
        load_dotenv(_env_path)
        break


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"true", "1", "yes"}


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError:
        logger.warning(f"Invalid {name}={value!r}, using {default}")
        return default
    if parsed <= 0:
        logger.warning(f"{name} must be positive, using {default}")
        return default
    return parsed


class Config:
    """Configuration manager for iashell."""

    def __init__(self):
        """Initialize configuration from environment variables."""

        # Model backend
        self.ollama_host: Optional[str] = os.getenv("OLLAMA_HOST") or None
        self.request_timeout: float = _env_float("IASHELL_REQUEST_TIMEOUT", 120.0)
        self.warmup_prompt: str = os.getenv("IASHELL_WARMUP_PROMPT", "hello")

        # Mock / offline mode
        self.mock_mode: bool = _env_bool("IASHELL_MOCK_MODE", False)

        # Execution
        self.shell: str = os.getenv("IASHELL_SHELL", "bash")

        # Presentation
        logo_file = os.getenv("IASHELL_LOGO_FILE")
        self.logo_file: Optional[Path] = Path(logo_file).expanduser() if logo_file else None
        self.history_file: Path = Path(os.getenv("IASHELL_HISTORY_FILE", str(STATE_DIR / "history")))

        # Logging
        self.log_level: str = os.getenv("IASHELL_LOG_LEVEL", "INFO").upper()
        self.console_log_level: str = os.getenv("IASHELL_CONSOLE_LOG_LEVEL", "WARNING").upper()
        self.log_file: Path = Path(os.getenv("IASHELL_LOG_FILE", str(STATE_DIR / "iashell.log")))
        self.console_logging: bool = _env_bool("IASHELL_CONSOLE_LOGGING", False)

        # Advanced Settings
        self.debug_mode: bool = _env_bool("IASHELL_DEBUG_MODE", False)
        if self.debug_mode:
            self.log_level = "DEBUG"

    def setup_logging(self) -> None:
        """Configure loguru sinks based on settings."""
        logger.remove()  # Remove default handler

        if self.console_logging:
            logger.add(
                sys.stderr,
                level=self.console_log_level,
                colorize=True,
                format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
            )

        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                self.log_file,
                level=self.log_level,
                rotation="10 MB",
                retention="1 week",
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"
            )
        except OSError as e:
            logger.warning(f"File logging disabled ({self.log_file}): {e}")

        if self.debug_mode:
            logger.info("Debug mode enabled")
        if self.mock_mode:
            logger.info("Mock mode enabled (model responses will be simulated)")

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"Config(ollama_host={self.ollama_host or 'default'}, "
            f"timeout={self.request_timeout}, shell={self.shell}, "
            f"mock={self.mock_mode})"
        )


# Global config instance
config = Config()
