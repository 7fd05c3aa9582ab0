"""
Model backend integration layer for iashell.
Provides a unified request/response interface over the model server.
"""

from iashell.llm.base_client import BaseLLMClient, LLMResponse
from iashell.llm.ollama_client import OllamaClient
from iashell.llm.mock_client import MockLLMClient
from iashell.llm.llm_factory import create_llm_client

__all__ = [
    "BaseLLMClient",
    "LLMResponse",
    "OllamaClient",
    "MockLLMClient",
    "create_llm_client"
]
