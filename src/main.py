"""FastAPI application initialization."""

import os
from contextlib import asynccontextmanager
from pathlib import Path

import logfire
import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from sentry_sdk.integrations.fastapi import FastApiIntegration

from src.api import analyze, health
from src.config import get_settings
from src.constants import JPEG_QUALITY
from src.exceptions import ScreenshotProError, UpstreamError
from src.logging_config import setup_logfire
from src.middleware.correlation_id import CorrelationIDMiddleware

BASE_DIR = Path(__file__).resolve().parent
APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()

    # Initialize Logfire for observability
    setup_logfire(app)

    # Initialize Sentry if DSN is provided
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            traces_sample_rate=settings.sentry_traces_sample_rate,
            environment=settings.env,
            integrations=[FastApiIntegration()],
        )

    logfire.info(
        "Application startup complete",
        environment=settings.env,
        provider=settings.screenshot_provider_url,
        slice_chunks=settings.slice_chunks,
    )

    yield

    logfire.info("Application shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Screenshot Pro",
    description="Full-page desktop and mobile screenshots split into downloadable chunks",
    version=APP_VERSION,
    lifespan=lifespan,
)

# Correlation ID middleware (must be first for request tracing)
app.add_middleware(CorrelationIDMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")
templates = Jinja2Templates(directory=BASE_DIR / "templates")

# Register routers
app.include_router(health.router, tags=["health"])
app.include_router(analyze.router, prefix="/api", tags=["screenshots"])


@app.exception_handler(ScreenshotProError)
async def screenshot_error_handler(request: Request, exc: ScreenshotProError):
    """Render service errors as ``{"error": message}``."""
    if isinstance(exc, UpstreamError):
        logfire.error(
            "Error analyzing website",
            profile=exc.profile,
            detail=exc.detail,
            path=request.url.path,
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed or mistyped request bodies are client errors."""
    logfire.warning(
        "Rejected request body", path=request.url.path, error_count=len(exc.errors())
    )
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Render the URL form and screenshot gallery."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "jpeg_quality": JPEG_QUALITY,
            "export_delay_ms": int(get_settings().export_delay_seconds * 1000),
        },
    )


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", 8000))
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=port, reload=os.getenv("ENV") == "local"
    )
