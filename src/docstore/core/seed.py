"""Seed a store from a YAML/JSON data file of documents"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from docstore.core.models import Document
from docstore.crud.memory_repo import MemoryRepo

logger = logging.getLogger(__name__)


def load_documents(path: Path) -> list[Document]:
    """Parse path as YAML (JSON included) into Documents. Raises ValueError on bad input.

    Accepts a top-level list of document mappings or a mapping with a 'documents' list.
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read data file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid data file {path}: {e}") from e

    if isinstance(raw, dict):
        if "documents" not in raw:
            raise ValueError(f"Invalid data file {path}: expected a list of documents")
        raw = raw["documents"]
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"Invalid data file {path}: expected a list of documents")

    try:
        return [Document.model_validate(item) for item in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path}: {e}") from e


def seed_repo(path: Path, copy_on_read: bool = False) -> MemoryRepo:
    """Return a fresh MemoryRepo with every document from path saved in file order."""
    repo = MemoryRepo(copy_on_read=copy_on_read)
    for doc in load_documents(path):
        repo.save(doc)
    logger.info("Loaded %d document(s) from %s", len(repo), path)
    return repo
