# contentgen/ai_tools/content/generator.py
import time

from core.config import settings
from core.logger import get_logger
from ai_clients.base import AIClient, CompletionRequest
from ai_tools.content.prompts import build_prompt
from ai_tools.content.schemas import ContentRequest, ContentResponse

logger = get_logger("content.generator")


async def generate_content(request: ContentRequest, ai_client: AIClient) -> ContentResponse:
    """
    Generate content for a validated request.

    Step 1: Build the prompt from the request
    Step 2: Send it to the model once (no retry)
    Step 3: Return the generated text with the prompt that produced it

    Args:
        request: Validated content request
        ai_client: Generation client constructed at startup

    Returns:
        ContentResponse: generatedContent + promptUsed

    Raises:
        AIProviderError: If the model call fails
    """
    prompt = build_prompt(request)

    logger.info(
        f"Using prompt: {prompt}",
        extra={
            'topic': request.topic[:50],
            'content_type': request.content_type.value,
            'tone': request.tone.value,
        }
    )

    started = time.perf_counter()
    completion = await ai_client.complete(
        CompletionRequest(prompt=prompt, temperature=settings.DEFAULT_TEMPERATURE)
    )

    logger.info(
        "Content generated",
        extra={
            'content_type': request.content_type.value,
            'model_name': completion.model,
            'provider': completion.provider,
            'duration': f"{time.perf_counter() - started:.2f}s",
        }
    )

    return ContentResponse(
        generated_content=completion.content,
        prompt_used=prompt,
    )
