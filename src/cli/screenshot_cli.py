"""Typer-based command-line client for capturing and exporting screenshots."""

import os

os.environ.setdefault("LOGFIRE_IGNORE_NO_CONFIG", "1")

import asyncio
from enum import Enum
from pathlib import Path

import typer

from src.config import get_settings
from src.exceptions import ScreenshotProError
from src.models.screenshot_models import AnalysisResult
from src.services.analysis_service import get_screenshot_analyzer
from src.services.image_export import export_all_chunks
from src.ui.state import Status, UIState, fail, submit, succeed

app = typer.Typer(help="Capture full-page website screenshots split into chunks.")


class FormatChoice(str, Enum):
    png = "png"
    jpg = "jpg"


class ProfileChoice(str, Enum):
    desktop = "desktop"
    mobile = "mobile"
    all = "all"


@app.callback()
def _main():
    """Capture full-page website screenshots split into chunks."""


def _selected_profiles(choice: ProfileChoice) -> list[str]:
    if choice is ProfileChoice.all:
        return ["desktop", "mobile"]
    return [choice.value]


async def _run_analysis(state: UIState) -> UIState:
    analyzer = get_screenshot_analyzer()
    try:
        result = await analyzer.analyze(state.url)
    except ScreenshotProError as e:
        return fail(state, e.message)
    return succeed(state, [result])


async def _export(
    result: AnalysisResult,
    profiles: list[str],
    fmt: str,
    output_dir: Path,
    delay_seconds: float,
) -> int:
    written = 0
    for name in profiles:
        screenshot = result.for_profile(name)
        paths = await export_all_chunks(screenshot, fmt, output_dir, delay_seconds)
        for path in paths:
            typer.echo(f"  ✓ {path}")
        written += len(paths)
    return written


@app.command()
def analyze(
    url: str = typer.Argument(..., help="Website URL to capture"),
    fmt: FormatChoice = typer.Option(
        FormatChoice.png, "--format", "-f", help="Download format"
    ),
    profile: ProfileChoice = typer.Option(
        ProfileChoice.all, "--profile", "-p", help="Which screenshots to export"
    ),
    output_dir: Path = typer.Option(
        Path("screenshots"), "--output-dir", "-o", help="Directory for exported chunks"
    ),
    no_export: bool = typer.Option(
        False, "--no-export", help="Only print the chunk summary"
    ),
):
    """Capture desktop and mobile screenshots of URL and export their chunks."""
    state = submit(UIState(url=url))
    if state.status is Status.FAILED:
        typer.echo(f"✗ {state.error}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Analyzing {state.url}...")
    state = asyncio.run(_run_analysis(state))
    if state.status is Status.FAILED:
        typer.echo(f"✗ {state.error}", err=True)
        raise typer.Exit(1)

    result = state.results[0]
    for name in ("desktop", "mobile"):
        screenshot = result.for_profile(name)
        typer.echo(f"{name.capitalize()} Screenshot: {screenshot.summary()}")

    if no_export:
        return

    selected = _selected_profiles(profile)
    typer.echo(f"Exporting {', '.join(selected)} chunks as {fmt.value.upper()}...")
    try:
        written = asyncio.run(
            _export(
                result,
                selected,
                fmt.value,
                output_dir,
                get_settings().export_delay_seconds,
            )
        )
    except ScreenshotProError as e:
        typer.echo(f"✗ {e.message}", err=True)
        raise typer.Exit(1)
    typer.echo(f"✓ Exported {written} chunks to {output_dir}")


if __name__ == "__main__":
    app()
