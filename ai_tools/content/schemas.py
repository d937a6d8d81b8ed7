# contentgen/ai_tools/content/schemas.py
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

TOPIC_MIN_LENGTH = 3


class ContentType(str, Enum):
    """Kinds of content the generator can write"""
    BLOG_POST = "blog_post"
    SOCIAL_MEDIA_UPDATE = "social_media_update"
    EMAIL_DRAFT = "email_draft"
    PRODUCT_DESCRIPTION = "product_description"


class Tone(str, Enum):
    FORMAL = "formal"
    CASUAL = "casual"
    HUMOROUS = "humorous"
    PERSUASIVE = "persuasive"


# ─────────────── Request / Response ───────────────

class ContentRequest(BaseModel):
    """Content generation request. Only the camelCase wire keys are accepted."""

    topic: str = Field(..., description="What the content is about")
    content_type: ContentType = Field(..., alias="contentType", description="Kind of content to generate")
    tone: Tone = Field(Tone.CASUAL, description="Writing tone")
    keywords: Optional[str] = Field(None, description="Comma-separated keywords")

    @field_validator("topic")
    @classmethod
    def topic_min_length(cls, value: str) -> str:
        # Length in UTF-16 code units, so "🚲🚲" counts as 4 like in the browser
        if len(value.encode("utf-16-le")) // 2 < TOPIC_MIN_LENGTH:
            raise PydanticCustomError(
                "string_too_short",
                "Topic must be at least 3 characters long.",
            )
        return value


class ContentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    generated_content: str = Field(..., alias="generatedContent", description="Text returned by the model")
    prompt_used: str = Field(..., alias="promptUsed", description="Exact prompt sent to the model")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Fixed error summary")
    details: str = Field(..., description="Underlying failure message")
