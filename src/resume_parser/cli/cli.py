"""Resume parser CLI - turn PDF/DOCX resumes into structured JSON."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from resume_parser.api.config import get_settings
from resume_parser.api.logging_config import configure_logging
from resume_parser.api.services.resume_service import (
    ResumeParserService,
    get_object_store,
    get_resume_url,
)
from resume_parser.lib.display import console, display_resume, err_console
from resume_parser.lib.errors import ResumeParserError
from resume_parser.lib.extraction import extract_text
from resume_parser.lib.models.models import FileType, ParsedResume

app = typer.Typer(
    name="resume-parser",
    help="📄 Resume parser - extract structured JSON from PDF and DOCX resumes",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main_callback(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
    ] = None,
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level or get_settings().log_level)


def _fail(exc: Exception) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {exc}")
    return typer.Exit(1)


@app.command()
def parse(
    path: Annotated[
        Optional[Path],
        typer.Argument(help="Local PDF or DOCX file", exists=True, dir_okay=False, readable=True),
    ] = None,
    key: Annotated[
        Optional[str],
        typer.Option("--key", "-k", help="Storage key of a resume in the configured bucket"),
    ] = None,
    model: Annotated[
        Optional[str],
        typer.Option("--model", "-m", help="Override the configured LLM model"),
    ] = None,
    raw: Annotated[
        bool,
        typer.Option("--raw", "-r", help="Print the model output without validation"),
    ] = False,
) -> None:
    """🧠 Parse a resume with the configured LLM.

    Examples:

        resume-parser parse ./jane.pdf

        resume-parser parse --key resumes/jane.docx --model claude-3-5-sonnet-latest
    """
    if (path is None) == (key is None):
        err_console.print("[red]Error:[/red] Provide exactly one of PATH or --key")
        raise typer.Exit(2)

    settings = get_settings()
    if model:
        settings = settings.model_copy(update={"llm_model": model})

    try:
        with console.status(f"[cyan]Parsing resume with {settings.llm_model}...[/cyan]", spinner="dots"):
            service = ResumeParserService(settings)
            if key is not None:
                output = service.parse(key)
            else:
                output = service.parse_bytes(FileType.from_key(path.name), path.read_bytes())
    except ResumeParserError as e:
        raise _fail(e) from e

    if raw:
        console.print(output, markup=False, highlight=False, soft_wrap=True)
        return

    try:
        resume = ParsedResume.from_llm_text(output)
    except ValidationError as e:
        err_console.print("[yellow]Warning:[/yellow] Model output does not match the resume schema")
        err_console.print(str(e), markup=False)
        console.print(output, markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1) from e

    display_resume(resume)


@app.command()
def extract(
    path: Annotated[
        Path,
        typer.Argument(help="Local PDF or DOCX file", exists=True, dir_okay=False, readable=True),
    ],
) -> None:
    """📝 Print the plain text extracted from a resume (no LLM call)."""
    try:
        text = extract_text(FileType.from_key(path.name), path.read_bytes())
    except ResumeParserError as e:
        raise _fail(e) from e

    if not text:
        console.print("[yellow]No text found in document.[/yellow]")
        return
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.command("fetch-url")
def fetch_url(
    key: Annotated[str, typer.Argument(help="Storage key of a resume")],
    ttl: Annotated[
        Optional[int],
        typer.Option("--ttl", help="URL lifetime in seconds (default from settings)"),
    ] = None,
) -> None:
    """🔗 Print a temporary read URL for a stored resume."""
    settings = get_settings()
    if ttl is not None:
        settings = settings.model_copy(update={"presigned_url_ttl": ttl})

    try:
        url = get_resume_url(settings, get_object_store(settings), key)
    except ResumeParserError as e:
        raise _fail(e) from e

    console.print(url, markup=False, highlight=False, soft_wrap=True)


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port")] = None,
    reload: Annotated[bool, typer.Option("--reload", help="Reload on code changes")] = False,
) -> None:
    """🚀 Run the HTTP API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "resume_parser.api.server:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_config=None,
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
