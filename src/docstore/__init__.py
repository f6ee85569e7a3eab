"""In-memory document repository with upsert, id lookup and OR-combined search"""

from docstore.core.models import Author, Document, SearchRequest
from docstore.crud.memory_repo import MemoryRepo
from docstore.crud.repo import DocumentRepo

__all__ = ["Author", "Document", "SearchRequest", "DocumentRepo", "MemoryRepo"]
