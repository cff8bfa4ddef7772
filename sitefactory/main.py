"""FastAPI application entry point"""

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from sitefactory.api import presence, websites  # noqa: E402
from sitefactory.core.config import settings  # noqa: E402
from sitefactory.models.errors import ApplicationError  # noqa: E402

logging.basicConfig(
    level=logging.DEBUG if settings.environment == "development" else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError):
    logger.error(f"[API] {request.method} {request.url.path} failed: {exc.code.value} {exc.message}")
    return JSONResponse(status_code=exc.http_status, content=exc.model_dump())


@app.get("/")
async def root():
    """Health check endpoint"""
    return {"status": "healthy", "version": settings.api_version}


@app.get("/health")
async def health():
    """Health check for monitoring"""
    return {"status": "healthy"}


# Register API routes
app.include_router(websites.router, prefix="/api", tags=["websites"])
app.include_router(presence.router, prefix="/api", tags=["presence"])
