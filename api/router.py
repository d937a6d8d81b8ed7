# contentgen/api/router.py
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ai_clients.base import AIClient
from ai_tools.content.generator import generate_content
from ai_tools.content.schemas import ContentRequest, ContentResponse, ErrorResponse
from core.exceptions import ContentGenError, error_details
from core.logger import get_logger
from core.validators import validate_payload

logger = get_logger("api.router")

router = APIRouter(prefix="/api", tags=["Content"])

GENERATION_FAILED = "Failed to generate content"


# ─────────────── Dependencies ───────────────
def get_ai_client(request: Request) -> AIClient:
    """Generation client created in the app lifespan"""
    return request.app.state.ai_client


# ─────────────── /api/generate-content ───────────────
@router.post(
    "/generate-content",
    response_model=ContentResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def generate_content_endpoint(
    request: Request,
    ai_client: AIClient = Depends(get_ai_client),
):
    # The body is validated here rather than by FastAPI so that malformed
    # requests share the 500 error shape with generation failures.
    try:
        payload = await request.json()
        content_request = validate_payload(ContentRequest, payload)
        return await generate_content(content_request, ai_client)
    except Exception as e:
        extra = {'error_code': e.error_code} if isinstance(e, ContentGenError) else {}
        logger.error(f"Error generating content: {e}", exc_info=True, extra=extra)

        error = ErrorResponse(error=GENERATION_FAILED, details=error_details(e))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error.model_dump(),
        )
