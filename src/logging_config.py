"""Centralized logging configuration with Pydantic Logfire integration."""

import logging
from typing import Any
from urllib.parse import urlsplit

import logfire
from fastapi import FastAPI

from src.config import get_settings


def setup_logfire(app: FastAPI) -> None:
    """
    Initialize and configure Pydantic Logfire for observability.

    Sets up:
    - FastAPI instrumentation (request/response tracing)
    - Pydantic instrumentation (model validation logging)
    - Outbound httpx instrumentation (screenshot provider calls)
    - Environment-aware Python logging format
    """
    settings = get_settings()

    logfire_config: dict[str, Any] = {
        "environment": settings.env,
        "send_to_logfire": "if-token-present",
    }
    if settings.logfire_token:
        logfire_config["token"] = settings.logfire_token

    logfire.configure(**logfire_config)

    logfire.instrument_fastapi(app)
    logfire.instrument_pydantic()
    logfire.instrument_httpx()

    configure_logging(settings.log_level, settings.env)


def configure_logging(log_level: str, env: str) -> None:
    """Configure stdlib logging; console format locally, bare messages elsewhere."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    if env == "local":
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        # Logfire handles structured formatting
        logging.basicConfig(level=level, format="%(message)s")


def summarize_url(url: str | None) -> str:
    """
    Reduce a URL to scheme and host for log attributes.

    Query strings and paths of user-submitted URLs can carry tokens, so
    only the origin is logged.

    Args:
        url: URL to summarize

    Returns:
        ``scheme://host`` or an empty string when the URL has no host
    """
    if not url:
        return ""

    parts = urlsplit(url)
    if not parts.netloc:
        return ""
    return f"{parts.scheme}://{parts.netloc}"


def data_uri_summary(image_data: str) -> dict[str, Any]:
    """Describe an inline image payload without logging the payload itself."""
    header, _, body = image_data.partition(",")
    if not header.startswith("data:"):
        return {"media_type": None, "payload_chars": 0}
    return {
        "media_type": header.removeprefix("data:").split(";")[0] or None,
        "payload_chars": len(body),
    }
