"""
CLI entry point for fetch-curl-logger.

Commands:
    curl-logger format <url>  - Print the curl command for a request
    curl-logger version       - Show version information
"""

from __future__ import annotations

import typer
from rich.console import Console

from curl_logger.config.settings import LoggerSettings
from curl_logger.formatter import build_curl_fragments
from curl_logger.loggers import PrettyJsonLogger, plain_logger
from curl_logger.protocol.types import RequestDescriptor

app = typer.Typer(
    name="curl-logger",
    help="Render HTTP requests as reproducible curl commands",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def _parse_header(raw: str) -> tuple[str, str]:
    """Split a curl-style ``Name: value`` header argument."""
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise typer.BadParameter(f"Header must look like 'Name: value', got {raw!r}")
    return name.strip(), value.strip()


@app.command("format")
def format_request(
    url: str = typer.Argument(..., help="Request URL"),
    method: str = typer.Option("GET", "--request", "-X", help="HTTP method"),
    header: list[str] | None = typer.Option(
        None, "--header", "-H", help="Header as 'Name: value' (repeatable)"
    ),
    data: str | None = typer.Option(None, "--data", "-d", help="Request body"),
    plain: bool = typer.Option(False, "--plain", help="Print fragments without rewriting"),
    no_redact: bool = typer.Option(
        False, "--no-redact", help="Leave Authorization values in clear text"
    ),
) -> None:
    """Print the curl command for a request to stderr."""
    try:
        headers = [_parse_header(raw) for raw in header or []]
    except typer.BadParameter as exc:
        err_console.print(f"Error: {exc}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=1) from exc

    descriptor = RequestDescriptor(url=url, method=method, headers=headers, body=data)
    fragments = build_curl_fragments(descriptor)

    if plain:
        plain_logger(fragments)
        return

    settings = LoggerSettings.from_env()
    if no_redact:
        settings = settings.model_copy(update={"redact_authorization": False})
    PrettyJsonLogger(settings)(fragments)


@app.command()
def version() -> None:
    """Show version information."""
    from curl_logger import __version__

    console.print(f"fetch-curl-logger v{__version__}")


if __name__ == "__main__":
    app()
