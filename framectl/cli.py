"""Typer CLI entrypoint."""

from __future__ import annotations

import logging

import typer

from framectl.core.errors import FramectlError
from framectl.core.service import BezelService, check_frame_override

NO_MATCH_EXIT_CODE = 2

app = typer.Typer(help="Find and cache device bezel frames for screenshots")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log lookup and download details"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


def _build_service() -> BezelService:
    return BezelService()


def _no_match(width: int, height: int) -> typer.Exit:
    typer.echo(f"No matching device bezel found for {width}x{height}", err=True)
    return typer.Exit(code=NO_MATCH_EXIT_CODE)


@app.command("devices")
def list_devices() -> None:
    """List catalog devices in match priority order."""
    try:
        service = _build_service()
        devices = service.list_devices()
        if not devices:
            typer.echo("Catalog contains no devices")
            return

        for device in devices:
            typer.echo(f"{device.name}: {device.resolution.width}x{device.resolution.height}")
            for frame in device.frames:
                typer.echo(f"  {frame.color} ({frame.orientation.value}): {frame.path}")
    except FramectlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("info")
def catalog_info() -> None:
    """Show bezel catalog metadata."""
    try:
        service = _build_service()
        metadata = service.metadata()
        typer.echo(f"Version: {metadata.version}")
        typer.echo(f"Last updated: {metadata.last_updated}")
        typer.echo(f"Source: {metadata.source}")
        typer.echo(f"Description: {metadata.description}")
        typer.echo(f"Devices: {len(service.list_devices())}")
    except FramectlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("match")
def match_screenshot(
    width: int = typer.Argument(..., min=1, help="Screenshot width in pixels"),
    height: int = typer.Argument(..., min=1, help="Screenshot height in pixels"),
) -> None:
    """Show which device frame fits a screenshot, without downloading it."""
    try:
        service = _build_service()
        match = service.find_match(width, height)
        if match is None:
            raise _no_match(width, height)
        typer.echo(f"Device: {match.device.name}")
        typer.echo(f"Frame: {match.frame.color} ({match.frame.orientation.value})")
        typer.echo(f"Path: {match.frame.path}")
        typer.echo(f"Match: {match.kind.value}")
    except FramectlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


@app.command("resolve")
def resolve_frame(
    width: int | None = typer.Argument(None, min=1, help="Screenshot width in pixels"),
    height: int | None = typer.Argument(None, min=1, help="Screenshot height in pixels"),
    frame: str | None = typer.Option(None, "--frame", help="Use this frame file instead of the catalog"),
) -> None:
    """Print the local path of the frame for a screenshot, downloading it if needed.

    With --frame, the catalog and cache are skipped entirely and WIDTH/HEIGHT
    may be omitted.
    """
    try:
        if frame is not None:
            typer.echo(str(check_frame_override(frame)))
            return
        if width is None or height is None:
            raise typer.BadParameter("WIDTH and HEIGHT are required unless --frame is given")
        service = _build_service()
        resolved = service.resolve(width, height)
        if resolved is None:
            raise _no_match(width, height)
        typer.echo(str(resolved.path))
    except FramectlError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from None


def run() -> None:
    app()


if __name__ == "__main__":
    run()
