"""
iashell YAML configuration

Loads named configuration sections with support for:
- Default configs shipped in iashell/config/*.yaml
- User overrides in ~/.iashell/config.yaml (one top-level key per section)
- Environment variable overrides (IASHELL_<SECTION>_<KEY>)
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

# Config directory (where default configs live)
CONFIG_DIR = Path(__file__).parent

USER_CONFIG_PATHS = [
    Path.home() / ".iashell" / "config.yaml",
    Path.home() / ".iashell" / "config.yml",
]


def _load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load a YAML file, returning empty dict if not found or invalid."""
    if not path.exists():
        return {}

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring {path}: top level is not a mapping")
        return {}
    return data


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


class ConfigLoader:
    """
    Loads and merges configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables (IASHELL_<SECTION>_*)
    2. User config (~/.iashell/config.yaml)
    3. Default config (iashell/config/*.yaml)
    """

    _cache: Dict[str, Dict[str, Any]] = {}
    _user_config_paths: List[Path] = USER_CONFIG_PATHS

    @classmethod
    def set_user_config_paths(cls, paths: List[Path]):
        """Point the loader at different user override files."""
        cls._user_config_paths = [Path(p) for p in paths]
        cls._cache.clear()

    @classmethod
    def load(cls, config_name: str) -> Dict[str, Any]:
        """
        Load a configuration by name.

        Args:
            config_name: Name of config file (without .yaml extension)
                        e.g., "presentation"

        Returns:
            Merged configuration dictionary
        """
        if config_name in cls._cache:
            return cls._cache[config_name]

        config = _load_yaml_file(CONFIG_DIR / f"{config_name}.yaml")

        for user_path in cls._user_config_paths:
            if user_path.exists():
                user_config = _load_yaml_file(user_path)
                section = user_config.get(config_name)
                if isinstance(section, dict):
                    config = _deep_merge(config, section)
                break

        config = cls._apply_env_overrides(config_name, config)

        cls._cache[config_name] = config
        return config

    @classmethod
    def _apply_env_overrides(cls, config_name: str, config: Dict) -> Dict:
        """Apply environment variable overrides."""
        prefix = f"IASHELL_{config_name.upper()}_"

        for key, value in os.environ.items():
            if key.startswith(prefix):
                # IASHELL_PRESENTATION_SEPARATOR -> separator
                config_key = key[len(prefix):].lower()

                if value.lower() == 'true':
                    config[config_key] = True
                elif value.lower() == 'false':
                    config[config_key] = False
                elif value.isdigit():
                    config[config_key] = int(value)
                else:
                    config[config_key] = value

        return config

    @classmethod
    def reload(cls, config_name: Optional[str] = None):
        """Reload configuration(s) from disk."""
        if config_name:
            cls._cache.pop(config_name, None)
        else:
            cls._cache.clear()


# Convenience functions
def load_config(name: str) -> Dict[str, Any]:
    """Load a configuration by name."""
    return ConfigLoader.load(name)


def reload_configs():
    """Reload all configurations from disk."""
    ConfigLoader.reload()
