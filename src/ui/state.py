"""Client UI state for the analyze form.

The form moves through discrete states:

    idle -> loading -> success | failed -> loading (on resubmission)

Each transition returns a new ``UIState``; nothing is mutated in place.
The browser page (``static/app.js``) follows the same cycle.
"""

from dataclasses import dataclass, replace
from enum import Enum

from src.constants import EMPTY_INPUT_MESSAGE
from src.models.screenshot_models import AnalysisResult


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


class InvalidTransition(RuntimeError):
    """Raised when a transition is not allowed from the current status."""


@dataclass(frozen=True)
class UIState:
    url: str = ""
    status: Status = Status.IDLE
    results: tuple[AnalysisResult, ...] = ()
    error: str = ""

    @property
    def loading(self) -> bool:
        return self.status is Status.LOADING


def edit_url(state: UIState, url: str) -> UIState:
    """Update the URL field. Editing is ignored while a request is in flight."""
    if state.loading:
        return state
    return replace(state, url=url)


def submit(state: UIState) -> UIState:
    """Start an analysis, clearing previous results and errors.

    A blank URL fails immediately without entering the loading state.
    """
    if state.loading:
        raise InvalidTransition("An analysis is already in progress")

    url = state.url.strip()
    if not url:
        return replace(state, status=Status.FAILED, results=(), error=EMPTY_INPUT_MESSAGE)
    return replace(state, url=url, status=Status.LOADING, results=(), error="")


def succeed(state: UIState, results: list[AnalysisResult]) -> UIState:
    if not state.loading:
        raise InvalidTransition(f"Cannot complete from {state.status.value}")
    return replace(state, status=Status.SUCCESS, results=tuple(results), error="")


def fail(state: UIState, error: str) -> UIState:
    if not state.loading:
        raise InvalidTransition(f"Cannot fail from {state.status.value}")
    return replace(
        state,
        status=Status.FAILED,
        results=(),
        error=error or "An error occurred. Please try again.",
    )
