"""Page Inspector CLI — inspect a web page from the terminal.

Usage:
    python cli/main.py --help

Commands:
    links     → probe and classify every link on the page
    urls      → list absolute outbound URLs
    images    → image alt-text coverage
    meta      → meta tags
    headings  → heading hierarchy
    serve     → run the HTTP API
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from backend.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import json
from typing import Any, Awaitable, Callable, Optional, TypeVar

import typer

from backend import inspector
from backend.config import configure_logging, settings
from backend.errors import DocumentUnavailable
from cli.rendering import (
    render_headings,
    render_images,
    render_links,
    render_meta_tags,
)

T = TypeVar("T")

app = typer.Typer(
    name="inspect-page",
    help="Page Inspector CLI.",
    no_args_is_help=True,
)

_URL_OPTION = typer.Option(..., "--url", help="Page URL to inspect.")
_UHF_OPTION = typer.Option(
    False,
    "--include-uhf/--no-include-uhf",
    help="Keep the surrounding template chrome (header/footer) in the inspection.",
)
_JSON_OPTION = typer.Option(False, "--json", help="Print the API JSON payload instead.")
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show debug logging.")


def _run(
    fetcher: Callable[[str, bool], Awaitable[T]],
    url: str,
    include_uhf: bool,
    verbose: bool,
) -> T:
    """Run an inspection coroutine, exiting with code 1 if the page is unavailable."""
    configure_logging("DEBUG" if verbose else "WARNING")
    try:
        return asyncio.run(fetcher(url, include_uhf))
    except DocumentUnavailable as exc:
        typer.echo(f"❌ {exc}", err=True)
        raise typer.Exit(code=1)


def _echo_json(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command("links")
def links(
    url: str = _URL_OPTION,
    include_uhf: bool = _UHF_OPTION,
    as_json: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Probe every link on the page and report status and redirects."""
    records = _run(inspector.link_details, url, include_uhf, verbose)
    if as_json:
        _echo_json({"links": [r.to_dict() for r in records]})
        return
    if not records:
        typer.echo("[links] No links found.")
        return
    typer.echo(render_links(records))
    broken = sum(1 for r in records if r.status_code >= 400)
    unreachable = sum(1 for r in records if r.unreachable)
    typer.echo("")
    typer.echo(
        f"[links] {len(records)} link(s), {broken} broken, {unreachable} unreachable."
    )


@app.command("urls")
def urls(
    url: str = _URL_OPTION,
    include_uhf: bool = _UHF_OPTION,
    as_json: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """List the absolute URLs linked from the page (no probing)."""
    found = _run(inspector.extract_page_urls, url, include_uhf, verbose)
    if as_json:
        _echo_json({"urls": found})
        return
    for u in found:
        typer.echo(u)


@app.command("images")
def images(
    url: str = _URL_OPTION,
    include_uhf: bool = _UHF_OPTION,
    as_json: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Report image alt-text coverage."""
    found = _run(inspector.image_details, url, include_uhf, verbose)
    if as_json:
        _echo_json({"images": [i.to_dict() for i in found]})
        return
    if not found:
        typer.echo("[images] No images found.")
        return
    typer.echo(render_images(found))
    missing = sum(1 for i in found if not i.has_alt)
    typer.echo("")
    typer.echo(f"[images] {len(found)} image(s), {missing} without alt text.")


@app.command("meta")
def meta(
    url: str = _URL_OPTION,
    include_uhf: bool = _UHF_OPTION,
    as_json: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """List the page's meta tags."""
    tags = _run(inspector.page_properties, url, include_uhf, verbose)
    if as_json:
        _echo_json({"metaTags": [t.to_dict() for t in tags]})
        return
    typer.echo(render_meta_tags(tags) or "[meta] No meta tags found.")


@app.command("headings")
def headings(
    url: str = _URL_OPTION,
    include_uhf: bool = _UHF_OPTION,
    as_json: bool = _JSON_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Show the heading hierarchy."""
    found = _run(inspector.heading_hierarchy, url, include_uhf, verbose)
    if as_json:
        _echo_json({"headings": [h.to_dict() for h in found]})
        return
    typer.echo(render_headings(found) or "[headings] No headings found.")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)."),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)."),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "backend.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
