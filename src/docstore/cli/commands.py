"""CLI command implementations"""

import json
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.models import Document, SearchRequest
from docstore.core.seed import seed_repo
from docstore.crud.memory_repo import MemoryRepo
from docstore.logger import setup_logger


DataFileOption = Annotated[Optional[str], typer.Option("--data-file", help="YAML/JSON file of documents")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _repo(settings: Settings) -> MemoryRepo:
    """Configure logging and seed a store from settings.data_file."""
    setup_logger(settings.log_level)
    if not settings.data_file:
        _fail("No data file given. Pass --data-file or set DOCSTORE_DATA_FILE.")
    try:
        return seed_repo(Path(settings.data_file), settings.copy_on_read)
    except ValueError as e:
        _fail(str(e))


def _dump(docs: list[Document], indent: int) -> str:
    return json.dumps([d.model_dump(mode="json") for d in docs], indent=indent, ensure_ascii=False)


def list_cmd(data_file: DataFileOption = None):
    """List stored documents as <id><TAB><title>."""
    repo = _repo(_settings(overrides={"data_file": data_file}))
    for doc in repo.list_all():
        typer.echo(f"{doc.id}\t{doc.title or ''}")


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    data_file: DataFileOption = None,
    ):
    """Print a single document as JSON."""
    settings = _settings(overrides={"data_file": data_file})
    doc = _repo(settings).find_by_id(doc_id)
    if doc is None:
        _fail(f"Document not found: {doc_id}")
    typer.echo(json.dumps(doc.model_dump(mode="json"), indent=settings.output_indent, ensure_ascii=False))


def search_cmd(
    data_file: DataFileOption = None,
    title_prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Match titles starting with this prefix")] = None,
    contents: Annotated[Optional[list[str]], typer.Option("--contains", help="Match content containing this substring")] = None,
    author_ids: Annotated[Optional[list[str]], typer.Option("--author-id", help="Match documents by this author")] = None,
    created_from: Annotated[Optional[datetime], typer.Option("--created-from", help="Match documents created at or after")] = None,
    created_to: Annotated[Optional[datetime], typer.Option("--created-to", help="Match documents created at or before")] = None,
    ):
    """Print documents matching ANY given filter as a JSON array."""
    settings = _settings(overrides={"data_file": data_file})
    repo = _repo(settings)
    request = SearchRequest(
        title_prefixes=title_prefixes or None,
        contains_contents=contents or None,
        author_ids=author_ids or None,
        created_from=created_from,
        created_to=created_to,
    )
    typer.echo(_dump(repo.search(request), settings.output_indent))
