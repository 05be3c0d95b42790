"""Exception hierarchy for screenshot analysis and export.

Each error carries the message shown to the user and the HTTP status the
API layer responds with.
"""

from src.constants import DECODE_FAILURE_MESSAGE, UPSTREAM_FAILURE_MESSAGE


class ScreenshotProError(Exception):
    """Base exception for analysis and export errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ScreenshotProError):
    """Raised when the submitted URL is missing or not a valid URL."""

    status_code = 400


class UpstreamError(ScreenshotProError):
    """Raised when the screenshot provider call fails.

    The user-facing message is always generic; the cause is kept on
    ``detail`` for logging only.
    """

    status_code = 500

    def __init__(self, detail: str, profile: str | None = None):
        super().__init__(UPSTREAM_FAILURE_MESSAGE)
        self.detail = detail
        self.profile = profile


class ClientDecodeError(ScreenshotProError):
    """Raised when an image payload cannot be decoded or re-encoded."""

    status_code = 422

    def __init__(self, detail: str):
        super().__init__(DECODE_FAILURE_MESSAGE)
        self.detail = detail
