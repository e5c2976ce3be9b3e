"""CLI entrypoints for OST Builder."""

from __future__ import annotations

import json
import webbrowser
from pathlib import Path

import typer

from ostbuilder.config import Settings, load_settings
from ostbuilder.logging import configure_logging, document_context, get_logger
from ostbuilder.markdown import extract_project_name, parse, serialize
from ostbuilder.sharing import build_share_link, encode_fragment
from ostbuilder.templates import create_default_markdown

app = typer.Typer(add_completion=False, help="Opportunity Solution Tree markdown tools")
logger = get_logger(__name__)

_FILE_ARG = typer.Argument(
    ...,
    exists=True,
    dir_okay=False,
    readable=True,
    help="OST markdown file (UTF-8).",
)


def _setup() -> Settings:
    settings = load_settings()
    configure_logging(settings.log_level)
    return settings


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text.") from exc


@app.command()
def tree(
    file: Path = _FILE_ARG,
    name: str | None = typer.Option(None, "--name", help="Project name to store on the tree"),
    pretty: bool = typer.Option(False, "--pretty", help="Indent the JSON output"),
) -> None:
    """Parse a markdown file and print the tree as JSON."""

    settings = _setup()
    with document_context(str(file)):
        markdown = _read(file)
        parsed = parse(markdown)
        parsed.name = name or extract_project_name(markdown, settings.default_project_name)
        logger.info("Parsed %d cards", len(parsed.cards))

    indent = settings.json_indent if pretty else None
    typer.echo(json.dumps(parsed.model_dump(mode="json"), ensure_ascii=False, indent=indent))


@app.command("format")
def format_(
    file: Path = _FILE_ARG,
    name: str | None = typer.Option(None, "--name", help="Project name heading to write"),
) -> None:
    """Print the normalised markdown for a file."""

    settings = _setup()
    with document_context(str(file)):
        markdown = _read(file)
        project_name = name or extract_project_name(markdown, settings.default_project_name)
        typer.echo(serialize(parse(markdown), project_name), nl=False)


@app.command()
def share(
    file: Path = _FILE_ARG,
    name: str | None = typer.Option(None, "--name", help="Project name shown in the app"),
    normalize: bool = typer.Option(
        True,
        "--normalize/--raw",
        help="Share the re-serialized tree (default) or the file exactly as written",
    ),
    open_browser: bool = typer.Option(False, "--open", help="Open the link in a browser"),
    share_base: str | None = typer.Option(
        None,
        "--share-base",
        help="Base URL of the app (overrides OSTBUILDER_SHARE_BASE)",
    ),
) -> None:
    """Print a share link that carries the whole tree in its URL fragment."""

    settings = _setup()
    with document_context(str(file)):
        markdown = _read(file)
        project_name = name or extract_project_name(markdown, settings.default_project_name)
        shared = serialize(parse(markdown), project_name) if normalize else markdown
        fragment = encode_fragment(shared, project_name)
        link = build_share_link(share_base or settings.share_base, fragment)
        logger.info("Share link is %d characters long", len(link))

    typer.echo(link)
    if open_browser:
        typer.echo(f'Opening "{project_name}" in your browser...', err=True)
        if not webbrowser.open(link):
            typer.echo("Could not open a browser; copy the link above.", err=True)


@app.command()
def template() -> None:
    """Print the starter OST document."""

    _setup()
    typer.echo(create_default_markdown(), nl=False)


if __name__ == "__main__":
    app()
