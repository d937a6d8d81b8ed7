# contentgen/ai_clients/base.py
"""
Provider-neutral types for text generation.

The HTTP layer only ever talks to an `AIClient`; the concrete SDK client
is built once at startup and injected, so tests can swap in a fake.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from core.exceptions import ConfigurationError


@dataclass
class CompletionRequest:
    """A single prompt plus sampling settings. None means provider default."""
    prompt: str
    temperature: Optional[float] = None
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    system_instruction: Optional[str] = None


@dataclass
class CompletionResponse:
    """
    Generated text as returned by the provider, with usage metadata.

    `content` is never trimmed or otherwise rewritten.
    """
    content: str
    model: str
    provider: str
    input_tokens: int = 0
    output_tokens: int = 0
    cost: float = 0.0
    raw_response: Optional[Any] = None

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


class AIClient(ABC):
    """One `complete()` call is one API request. Implementations never retry."""

    provider: str = "unknown"

    def __init__(self, api_key: Optional[str]):
        if not api_key:
            raise ConfigurationError(
                f"Missing API key for provider '{self.provider}'",
                provider=self.provider
            )
        self.api_key = api_key

    @abstractmethod
    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        """
        Raises:
            AIProviderError: The request failed or produced no text
        """
