"""
LLM Factory - Creates the model client for the configured backend.
"""

from typing import Optional

from loguru import logger

from iashell.core.config import Config
from iashell.llm.base_client import BaseLLMClient
from iashell.llm.mock_client import MockLLMClient
from iashell.llm.ollama_client import OllamaClient


def create_llm_client(config: Optional[Config] = None) -> BaseLLMClient:
    """
    Create the model client described by the configuration.

    Args:
        config: Configuration (optional, uses global config)

    Returns:
        MockLLMClient in mock mode, otherwise an OllamaClient
    """
    from iashell.core.config import config as default_config

    config = config or default_config

    if config.mock_mode:
        logger.warning("Mock mode active – using MockLLMClient.")
        return MockLLMClient(warmup_prompt=config.warmup_prompt)

    return OllamaClient(
        host=config.ollama_host,
        timeout=config.request_timeout,
        warmup_prompt=config.warmup_prompt
    )
