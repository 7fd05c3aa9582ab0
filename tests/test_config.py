"""
Tests for environment configuration and the YAML config loader.
"""

from pathlib import Path

import pytest
from loguru import logger

from iashell.config import ConfigLoader, USER_CONFIG_PATHS, load_config
from iashell.core.config import Config


@pytest.fixture
def user_config(tmp_path):
    """Point the loader at a temporary user config file and restore afterwards."""
    path = tmp_path / "config.yaml"
    ConfigLoader.set_user_config_paths([path])
    yield path
    ConfigLoader.set_user_config_paths(USER_CONFIG_PATHS)


class TestConfigLoader:

    def test_packaged_defaults(self, user_config):
        presentation = load_config("presentation")

        assert presentation["clear_screen"] is True
        assert presentation["gradients"]["qwen"] == ["#4E49E7", "#A849E7"]

    def test_user_override_is_deep_merged(self, user_config):
        user_config.write_text(
            "presentation:\n"
            "  separator: '----'\n"
            "  gradients:\n"
            "    llama: ['#000000', '#111111']\n",
            encoding="utf-8"
        )
        ConfigLoader.reload()

        presentation = load_config("presentation")

        assert presentation["separator"] == "----"
        assert presentation["gradients"]["llama"] == ["#000000", "#111111"]
        assert presentation["gradients"]["gemma"] == ["#007BFF", "#00C6FF"]

    def test_env_override(self, user_config, monkeypatch):
        monkeypatch.setenv("IASHELL_PRESENTATION_CLEAR_SCREEN", "false")
        ConfigLoader.reload("presentation")

        assert load_config("presentation")["clear_screen"] is False
        ConfigLoader.reload("presentation")

    def test_broken_user_file_is_ignored(self, user_config):
        user_config.write_text("presentation: [unclosed", encoding="utf-8")
        ConfigLoader.reload()

        assert load_config("presentation")["clear_screen"] is True

    def test_unknown_section(self, user_config):
        assert load_config("does_not_exist") == {}


class TestConfig:

    def test_defaults(self, monkeypatch):
        for name in ("OLLAMA_HOST", "IASHELL_REQUEST_TIMEOUT", "IASHELL_SHELL",
                     "IASHELL_MOCK_MODE", "IASHELL_LOGO_FILE", "IASHELL_DEBUG_MODE"):
            monkeypatch.delenv(name, raising=False)

        cfg = Config()

        assert cfg.ollama_host is None
        assert cfg.request_timeout == 120.0
        assert cfg.shell == "bash"
        assert cfg.mock_mode is False
        assert cfg.logo_file is None

    def test_environment_values(self, monkeypatch):
        monkeypatch.setenv("OLLAMA_HOST", "http://gpu-box:11434")
        monkeypatch.setenv("IASHELL_REQUEST_TIMEOUT", "30")
        monkeypatch.setenv("IASHELL_SHELL", "zsh")
        monkeypatch.setenv("IASHELL_MOCK_MODE", "yes")
        monkeypatch.setenv("IASHELL_LOGO_FILE", "~/logos.json")

        cfg = Config()

        assert cfg.ollama_host == "http://gpu-box:11434"
        assert cfg.request_timeout == 30.0
        assert cfg.shell == "zsh"
        assert cfg.mock_mode is True
        assert cfg.logo_file == Path("~/logos.json").expanduser()

    @pytest.mark.parametrize("value", ["soon", "-5", "0"])
    def test_invalid_timeout_falls_back(self, monkeypatch, value):
        monkeypatch.setenv("IASHELL_REQUEST_TIMEOUT", value)

        assert Config().request_timeout == 120.0

    def test_debug_mode_raises_log_level(self, monkeypatch):
        monkeypatch.setenv("IASHELL_DEBUG_MODE", "true")

        assert Config().log_level == "DEBUG"

    def test_setup_logging_writes_log_file(self, monkeypatch, tmp_path):
        log_file = tmp_path / "logs" / "iashell.log"
        monkeypatch.setenv("IASHELL_LOG_FILE", str(log_file))

        Config().setup_logging()

        assert log_file.parent.is_dir()
        logger.remove()
