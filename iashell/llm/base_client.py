"""
Base model client interface.
Every model backend the shell can talk to implements this interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List

from loguru import logger

from iashell.core.errors import GatewayError

DEFAULT_WARMUP_PROMPT = "hello"


@dataclass
class LLMResponse:
    """A complete (non-streamed) generation."""
    content: str
    model: str
    tokens_used: int = 0
    finish_reason: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)


class BaseLLMClient(ABC):
    """
    Abstract request/response gateway to a generative-model backend.

    Implementations raise GatewayError for every backend failure so callers
    only need one except clause.
    """

    def __init__(self, warmup_prompt: str = DEFAULT_WARMUP_PROMPT):
        self.warmup_prompt = warmup_prompt

    @abstractmethod
    def list_models(self) -> List[str]:
        """
        List the models available on the backend.

        Returns:
            Model names, in backend order

        Raises:
            GatewayError: If the backend cannot be reached
        """
        pass

    @abstractmethod
    def generate(self, model: str, prompt: str) -> LLMResponse:
        """
        Generate a completion for a prompt, waiting for the full response.

        Args:
            model: Model identifier
            prompt: Full prompt text

        Returns:
            LLMResponse with generated content

        Raises:
            GatewayError: If the request fails
        """
        pass

    def is_available(self) -> bool:
        """
        Check if the backend answers.

        Returns:
            True if models can be listed, False otherwise
        """
        try:
            self.list_models()
            return True
        except GatewayError as e:
            logger.warning(f"{self.__class__.__name__} not available: {e}")
            return False

    def warm_up(self, model: str) -> bool:
        """
        Send a throwaway request so the backend loads the model into memory.

        Best effort: failures are logged and reported as False, never raised.
        """
        try:
            self.generate(model, self.warmup_prompt)
        except GatewayError as e:
            logger.warning(f"Warm-up of '{model}' failed: {e}")
            return False
        logger.info(f"Model '{model}' warmed up")
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
