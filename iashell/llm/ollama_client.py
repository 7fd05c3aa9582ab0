"""
Ollama client implementation.
Talks to a local (or OLLAMA_HOST) Ollama server through the ollama library.
"""

from typing import List, Optional

import httpx
import ollama
from loguru import logger

from iashell.core.errors import GatewayError
from iashell.llm.base_client import BaseLLMClient, LLMResponse, DEFAULT_WARMUP_PROMPT

# Everything the ollama client can raise for an unreachable or failing server.
# Connection refusals surface as the builtin ConnectionError; timeouts as httpx errors.
BACKEND_ERRORS = (ollama.ResponseError, ollama.RequestError, httpx.HTTPError, ConnectionError)


class OllamaClient(BaseLLMClient):
    """Ollama model client."""

    def __init__(
        self,
        host: Optional[str] = None,
        timeout: float = 120.0,
        warmup_prompt: str = DEFAULT_WARMUP_PROMPT,
        client: Optional[ollama.Client] = None
    ):
        """
        Initialize Ollama client.

        Args:
            host: Server address; the library falls back to OLLAMA_HOST when None
            timeout: Seconds to wait for any single request
            warmup_prompt: Prompt sent by warm_up()
            client: Pre-built ollama.Client (mainly for tests)
        """
        super().__init__(warmup_prompt=warmup_prompt)
        self.host = host
        self.timeout = timeout
        self.client = client or ollama.Client(host=host, timeout=timeout)
        logger.info(f"Ollama client initialized: host={host or 'default'}, timeout={timeout}s")

    def list_models(self) -> List[str]:
        try:
            response = self.client.list()
        except BACKEND_ERRORS as e:
            logger.error(f"Ollama list error: {e}")
            raise GatewayError(f"Could not list Ollama models: {e}") from e

        names = [m.model for m in response.models if m.model]
        logger.debug(f"Ollama models: {names}")
        return names

    def generate(self, model: str, prompt: str) -> LLMResponse:
        try:
            response = self.client.generate(model=model, prompt=prompt, stream=False)
        except BACKEND_ERRORS as e:
            logger.error(f"Ollama generate error ({model}): {e}")
            raise GatewayError(f"Error contacting Ollama: {e}") from e

        content = response.response or ""
        tokens_used = (response.prompt_eval_count or 0) + (response.eval_count or 0)
        logger.debug(f"Ollama response ({model}, {tokens_used} tokens): {content!r}")

        return LLMResponse(
            content=content,
            model=response.model or model,
            tokens_used=tokens_used,
            finish_reason=response.done_reason or "",
            metadata={
                "prompt_tokens": response.prompt_eval_count,
                "completion_tokens": response.eval_count,
                "total_duration": response.total_duration,
            }
        )

    def __repr__(self) -> str:
        return f"OllamaClient(host={self.host or 'default'})"
