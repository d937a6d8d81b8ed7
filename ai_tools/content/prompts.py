# contentgen/ai_tools/content/prompts.py
from ai_tools.content.schemas import ContentRequest, ContentType

# ============================================================
# Content-type guidance appended after the base instruction
# ============================================================
CONTENT_TYPE_GUIDANCE = {
    ContentType.BLOG_POST: (
        "The blog post should be engaging, well-structured with a clear introduction, "
        "body, and conclusion. Aim for around 500-800 words."
    ),
    ContentType.SOCIAL_MEDIA_UPDATE: (
        "Keep it concise and engaging for social media. Include relevant hashtags "
        "if possible. Max 280 characters."
    ),
    ContentType.EMAIL_DRAFT: (
        "Draft a professional email. Include a subject line, greeting, body, and closing."
    ),
    ContentType.PRODUCT_DESCRIPTION: (
        "Write a compelling product description highlighting key features and benefits."
    ),
}

BASE_PROMPT_TEMPLATE = 'Generate a {content_type} about "{topic}".'
TONE_TEMPLATE = " The tone should be {tone}."
KEYWORDS_TEMPLATE = " Please incorporate the following keywords: {keywords}."


def build_prompt(request: ContentRequest) -> str:
    """
    Render the prompt sent to the model for a validated request.

    Args:
        request: Validated content request (tone already defaulted)

    Returns:
        str: Base instruction, optional tone and keyword clauses, then the
        guidance for the requested content type
    """
    prompt = BASE_PROMPT_TEMPLATE.format(
        content_type=request.content_type.value,
        topic=request.topic,
    )

    if request.tone:
        prompt += TONE_TEMPLATE.format(tone=request.tone.value)

    if request.keywords:
        prompt += KEYWORDS_TEMPLATE.format(keywords=request.keywords)

    prompt += " " + CONTENT_TYPE_GUIDANCE[request.content_type]

    return prompt


# ============================================================
# Test
# ============================================================
if __name__ == "__main__":
    for content_type in ContentType:
        sample = ContentRequest.model_validate(
            {"topic": "electric bikes", "contentType": content_type.value, "keywords": "eco, commute"}
        )
        print(f"\n[{content_type.value}]")
        print(build_prompt(sample))
