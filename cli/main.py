"""Broken-links checker CLI — entry-point for all operations.

Usage:
    python cli/main.py --help

Commands:
    check     → audit one page's links and print a report
    serve     → run the HTTP API with uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from linkcheck.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from contextlib import redirect_stdout

import typer

from linkcheck.checker import PageFetchError, check_broken_links
from cli.rendering import normalize_page_url, render_report

app = typer.Typer(
    name="linkcheck",
    help="Find broken links on a web page.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Check
# ---------------------------------------------------------------------------
@app.command("check")
def check(
    url: str = typer.Option(..., help="Page to audit (https:// is assumed if omitted)."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON report."),
) -> None:
    """Fetch a page, probe every link on it and report the broken ones."""
    page_url = normalize_page_url(url)
    if not page_url:
        typer.echo("❌ URL is required.")
        raise typer.Exit(code=1)

    # Progress lines go to stderr when stdout must stay valid JSON.
    progress = sys.stderr if as_json else sys.stdout
    try:
        with redirect_stdout(progress):
            result = check_broken_links(page_url)
    except PageFetchError as exc:
        typer.echo(f"❌ {exc}")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        typer.echo(render_report(result))


# ---------------------------------------------------------------------------
# Serve
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(3001, help="Port to listen on."),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    typer.echo(f"[serve] Broken Links Checker API on http://{host}:{port}")
    uvicorn.run("linkcheck.api.app:app", host=host, port=port)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
