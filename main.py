# contentgen/main.py
"""
AI Content Generator Backend - Main Application Entry Point
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from ai_clients.gemini_client import GeminiClient
from api.router import router as content_router
from core.config import settings
from core.logger import get_logger

logger = get_logger("main")


# ─────────────────────────────────────────────────────────────────────────────
# Lifespan: the generation client is built once and shared by all requests
# ─────────────────────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    app.state.ai_client = GeminiClient()
    logger.info(
        "Generation client ready",
        extra={'provider': app.state.ai_client.provider}
    )
    logger.info(f"Backend server listening at http://localhost:{settings.PORT}")
    logger.info(
        f"Content generation endpoint available at "
        f"http://localhost:{settings.PORT}/api/generate-content"
    )

    yield


# ─────────────────────────────────────────────────────────────────────────────
# FastAPI App
# ─────────────────────────────────────────────────────────────────────────────
app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="Generates blog posts, social updates, emails and product descriptions",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ─────────────────────────────────────────────────────────────────────────────
# Health Check
# ─────────────────────────────────────────────────────────────────────────────
@app.get("/", response_class=PlainTextResponse, tags=["Root"])
async def root():
    return "AI Content Generator Backend is running!"


app.include_router(content_router)


def run() -> None:
    """Start uvicorn on settings.HOST:settings.PORT (default port 3000)"""
    import uvicorn

    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
