# contentgen/ai_clients/gemini_client.py
from typing import Optional

from google import genai
from google.genai import types

from core.config import settings
from core.exceptions import GeminiError
from core.logger import get_logger, log_token_usage
from ai_clients.base import AIClient, CompletionRequest, CompletionResponse

# USD per 1M tokens (input, output)
PRICING = {
    'gemini-2.5-flash-lite': (0.10, 0.40),
    'gemini-2.5-flash': (0.30, 2.50),
    'gemini-2.5-pro': (1.25, 10.00),
    'gemini-2.0-flash': (0.10, 0.40),
}


def estimate_cost(model: str, input_tokens: int, output_tokens: int) -> float:
    """Price a call by the longest known model-name prefix. Unknown models cost 0."""
    matches = [name for name in PRICING if model.startswith(name)]
    if not matches:
        return 0.0

    input_price, output_price = PRICING[max(matches, key=len)]
    return (input_tokens * input_price + output_tokens * output_price) / 1_000_000


class GeminiClient(AIClient):
    """Async wrapper around `google-genai` generate_content."""

    provider = "gemini"

    def __init__(self, api_key: Optional[str] = None):
        super().__init__(api_key or settings.GEMINI_API_KEY)
        self.logger = get_logger("ai_client.gemini")
        self.client = genai.Client(api_key=self.api_key)

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        model = request.model or settings.MODEL_GEMINI
        temperature = request.temperature
        if temperature is None:
            temperature = settings.DEFAULT_TEMPERATURE

        self.logger.debug("Calling Gemini", extra={'model_name': model})

        try:
            response = await self.client.aio.models.generate_content(
                model=model,
                contents=request.prompt,
                config=types.GenerateContentConfig(
                    temperature=temperature,
                    max_output_tokens=request.max_tokens,
                    system_instruction=request.system_instruction,
                ),
            )
        except Exception as e:
            self.logger.error(f"Gemini call failed: {type(e).__name__}: {e}")
            raise GeminiError(
                f"Gemini API request failed: {e}",
                model=model,
                status_code=getattr(e, "code", None)
            ) from e

        # Returned as-is; whitespace-only output counts as no output
        content = response.text
        if not content or not content.strip():
            raise GeminiError("Empty response from Gemini", model=model)

        usage = response.usage_metadata
        input_tokens = (usage.prompt_token_count or 0) if usage else 0
        output_tokens = (usage.candidates_token_count or 0) if usage else 0
        cost = estimate_cost(model, input_tokens, output_tokens)

        log_token_usage(model, input_tokens, output_tokens, cost)

        return CompletionResponse(
            content=content,
            model=model,
            provider=self.provider,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            cost=cost,
            raw_response=response,
        )


if __name__ == "__main__":
    import asyncio

    async def main():
        client = GeminiClient()
        response = await client.complete(
            CompletionRequest(prompt="Write a haiku about electric bikes.", temperature=0.7)
        )
        print(f"{response.model}: {response.total_tokens} tokens, ${response.cost:.6f}")
        print(response.content)

    asyncio.run(main())
