# contentgen/ai_clients/__init__.py
"""Text generation clients. Gemini is the only provider."""

from .base import AIClient, CompletionRequest, CompletionResponse
from .gemini_client import GeminiClient, estimate_cost

__all__ = [
    "AIClient",
    "CompletionRequest",
    "CompletionResponse",
    "GeminiClient",
    "estimate_cost",
]
