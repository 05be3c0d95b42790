"""URL validation for analysis requests.

Checks that a submitted URL is present and parses as an absolute URL,
and normalizes it before it is handed to the screenshot provider.
"""

from typing import NamedTuple

import logfire
from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.constants import INVALID_URL_MESSAGE, URL_REQUIRED_MESSAGE
from src.exceptions import ValidationError

_url_adapter = TypeAdapter(AnyUrl)


class URLValidationResult(NamedTuple):
    """Result of URL validation.

    Attributes:
        is_valid: Whether the URL passed validation.
        url: Normalized URL if valid, None otherwise.
        error_code: Error code if validation failed, None otherwise.
        error_message: Human-readable error message if validation failed.
    """

    is_valid: bool
    url: str | None
    error_code: str | None
    error_message: str | None


def validate_url(raw_url: str | None) -> URLValidationResult:
    """Validate and normalize a submitted URL.

    Checks:
    - Present and not whitespace-only
    - Parses as an absolute URL (scheme and host)

    Args:
        raw_url: URL exactly as submitted.

    Returns:
        URLValidationResult with the normalized URL or error details.
    """
    if raw_url is None or not raw_url.strip():
        return URLValidationResult(
            is_valid=False,
            url=None,
            error_code="missing_url",
            error_message=URL_REQUIRED_MESSAGE,
        )

    try:
        parsed = _url_adapter.validate_python(raw_url.strip())
    except PydanticValidationError:
        return URLValidationResult(
            is_valid=False,
            url=None,
            error_code="invalid_url",
            error_message=INVALID_URL_MESSAGE,
        )

    return URLValidationResult(
        is_valid=True, url=str(parsed), error_code=None, error_message=None
    )


def require_valid_url(raw_url: str | None) -> str:
    """Return the normalized URL or raise ``ValidationError``."""
    result = validate_url(raw_url)
    if not result.is_valid:
        logfire.warning("Rejected analysis URL", error_code=result.error_code)
        raise ValidationError(result.error_message or INVALID_URL_MESSAGE)
    return result.url
