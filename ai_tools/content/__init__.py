# contentgen/ai_tools/content/__init__.py
"""
Content Generation Module

Validates content requests, builds the prompt for each content type
and sends it to the configured model.
"""

from .schemas import ContentRequest, ContentResponse, ContentType, ErrorResponse, Tone
from .prompts import build_prompt
from .generator import generate_content

__all__ = [
    "ContentRequest",
    "ContentResponse",
    "ContentType",
    "ErrorResponse",
    "Tone",
    "build_prompt",
    "generate_content",
]
