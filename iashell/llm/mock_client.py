"""
Mock model client used for offline/demo mode and tests.
Returns deterministic command suggestions without a running Ollama server.
"""

from typing import Dict, List, Optional, Sequence

from iashell.core.errors import GatewayError
from iashell.llm.base_client import BaseLLMClient, LLMResponse, DEFAULT_WARMUP_PROMPT

# Keyword -> canned suggestion, deliberately decorated the way real models answer.
DEFAULT_SUGGESTIONS: Dict[str, str] = {
    "list": "`ls -la`",
    "date": "```bash\ndate\n```",
    "where": "pwd",
    "disk": "```sh\ndf -h\n```",
    "who": "whoami",
}


class MockLLMClient(BaseLLMClient):
    """Simple rule-based client that simulates an Ollama server."""

    def __init__(
        self,
        models: Optional[Sequence[str]] = None,
        responses: Optional[List[str]] = None,
        fail_with: Optional[str] = None,
        warmup_prompt: str = DEFAULT_WARMUP_PROMPT
    ):
        """
        Args:
            models: Model names reported by list_models()
            responses: Queue of raw responses returned by generate(), in order;
                keyword rules apply once it is empty
            fail_with: If set, every call raises GatewayError with this message
            warmup_prompt: Prompt sent by warm_up()
        """
        super().__init__(warmup_prompt=warmup_prompt)
        self.models = list(models) if models is not None else ["mock-llama3:latest", "mock-mistral:7b"]
        self.responses = list(responses or [])
        self.fail_with = fail_with
        self.prompts: List[str] = []
        self._call_count = 0

    def list_models(self) -> List[str]:
        if self.fail_with:
            raise GatewayError(self.fail_with)
        return list(self.models)

    def generate(self, model: str, prompt: str) -> LLMResponse:
        self._call_count += 1
        self.prompts.append(prompt)

        if self.fail_with:
            raise GatewayError(self.fail_with)

        if self.responses:
            content = self.responses.pop(0)
        else:
            content = self._suggest(prompt)

        return LLMResponse(
            content=content,
            model=model,
            tokens_used=len(content.split()),
            finish_reason="stop",
            metadata={"mock": True, "call": self._call_count}
        )

    def _suggest(self, prompt: str) -> str:
        request = prompt.rsplit("\n", 1)[-1].lower()
        for keyword, suggestion in DEFAULT_SUGGESTIONS.items():
            if keyword in request:
                return suggestion
        return f"echo {request.strip()!r}"

    @property
    def call_count(self) -> int:
        return self._call_count
