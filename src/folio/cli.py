"""Folio CLI - Portfolio Site Renderer."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .app import build_services, render_site
from .config import settings
from .services import HttpResourceFetcher, LocalResourceFetcher, Ok, ResourceFetcher
from .utils.async_bridge import run_async_in_sync
from .utils.console import console
from .utils.logging import setup_logging
from .validation.models import CheckInput, RenderInput, SiteSourceInput

logger = logging.getLogger(__name__)


def _validate_input[M: BaseModel](model_class: type[M], **kwargs: Any) -> M:
    """Validate input using Pydantic model, exit on validation error.

    Args:
        model_class: Pydantic model class to use for validation
        **kwargs: Keyword arguments to pass to the model constructor

    Returns:
        The validated model

    Raises:
        typer.Exit: If validation fails (exits with code 1)
    """
    try:
        return model_class(**kwargs)
    except PydanticValidationError as e:
        console.print(f"[red]Validation error: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(code=1)


def _print_panel(message: str, style: str = "blue") -> None:
    """Print a styled panel message."""
    console.print(Panel(f"[bold]{message}[/bold]", style=style))


def _split_sections(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@asynccontextmanager
async def _open_fetcher(source: SiteSourceInput) -> AsyncIterator[ResourceFetcher]:
    """Open the fetch boundary for the chosen site source.

    Precedence: --site-dir, then --base-url, then SITE_DIR, then SITE_BASE_URL.
    """
    site_dir = source.site_dir
    if site_dir is None and source.base_url is None:
        site_dir = settings.site_dir

    if site_dir is not None:
        console.print(f"  Source: {site_dir}")
        yield LocalResourceFetcher(site_dir)
        return

    base_url = str(source.base_url) if source.base_url else settings.site_base_url
    console.print(f"  Source: {base_url}")
    async with HttpResourceFetcher(base_url, timeout=settings.http_timeout) as fetcher:
        yield fetcher


app = typer.Typer(
    name="folio",
    help="Portfolio Site Renderer - fetch the site's JSON documents and render the page",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]Folio[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Folio - your portfolio, rendered from static JSON."""
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        console_level=settings.console_log_level,
    )


BaseUrlOption = Annotated[
    str | None,
    typer.Option("--base-url", "-u", help="URL the static site is served from"),
]
SiteDirOption = Annotated[
    Path | None,
    typer.Option("--site-dir", "-d", help="Local static site directory to read instead"),
]


@app.command("render")
def render(
    base_url: BaseUrlOption = None,
    site_dir: SiteDirOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="HTML file to write"),
    ] = None,
    visible: Annotated[
        str,
        typer.Option("--visible", help="Comma-separated section ids to mark active"),
    ] = "",
) -> None:
    """Render the full portfolio page to an HTML file."""
    params = _validate_input(
        RenderInput,
        base_url=base_url,
        site_dir=site_dir,
        output=output or Path(settings.output_filename),
        visible=_split_sections(visible),
    )

    _print_panel("Rendering portfolio site...")

    async def _render() -> str:
        async with _open_fetcher(params) as fetcher:
            return await render_site(fetcher, settings, params.visible or None)

    html = run_async_in_sync(_render())
    params.output.parent.mkdir(parents=True, exist_ok=True)
    params.output.write_text(html, encoding="utf-8")

    logger.info("Rendered site to %s", params.output)
    console.print(f"  [green]✓ Saved:[/green] {params.output}")


@app.command("check")
def check(
    base_url: BaseUrlOption = None,
    site_dir: SiteDirOption = None,
) -> None:
    """Check which of the site's JSON documents can be loaded."""
    params = _validate_input(CheckInput, base_url=base_url, site_dir=site_dir)

    _print_panel("Checking site documents...")

    async def _check() -> list[tuple[str, str, str, str]]:
        rows = []
        async with _open_fetcher(params) as fetcher:
            for service in build_services(fetcher, settings).all():
                result = await service.outcome()
                if isinstance(result, Ok):
                    rows.append((service.resource_name, service.path, "ok", ""))
                else:
                    rows.append((service.resource_name, service.path, "unavailable", result.reason))
        return rows

    rows = run_async_in_sync(_check())

    table = Table(title="Site documents")
    table.add_column("Document", style="cyan")
    table.add_column("Path")
    table.add_column("Status")
    table.add_column("Reason", style="dim")
    for name, path, status, reason in rows:
        styled = "[green]✓ ok[/green]" if status == "ok" else "[red]✗ unavailable[/red]"
        table.add_row(name, path, styled, reason)
    console.print(table)

    failed = [name for name, _, status, _ in rows if status != "ok"]
    if failed:
        console.print(f"[yellow]⚠ {len(failed)} document(s) unavailable[/yellow]")
        raise typer.Exit(code=1)
    console.print("[green]All documents available[/green]")


if __name__ == "__main__":
    app()
