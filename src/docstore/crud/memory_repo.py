import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from docstore.core.matching import matches
from docstore.core.models import Document, SearchRequest
from docstore.crud.repo import DocumentRepo

logger = logging.getLogger(__name__)


@dataclass
class MemoryRepo(DocumentRepo):
    """Document store backed by an insertion-ordered dict keyed by id.

    Reads return the stored instances unless copy_on_read is set, in which
    case find_by_id/search/list_all hand out deep copies. A caller holding a
    shared reference may change its id, so keys are only a lookup hint: a
    document's current id always decides what it is found and replaced by.
    """
    copy_on_read: bool = False
    _docs: dict[str, Document] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self._docs)

    def _out(self, doc: Document) -> Document:
        return doc.model_copy(deep=True) if self.copy_on_read else doc

    def _key_of(self, doc_id: str) -> str | None:
        """Return the key of the first stored document whose current id is doc_id."""
        doc = self._docs.get(doc_id)
        if doc is not None and doc.id == doc_id:
            return doc_id
        for key, d in self._docs.items():
            if d.id == doc_id:
                return key
        return None

    def _rekey(self, key: str) -> None:
        """Move a stale entry to a key matching its current id, keeping its position."""
        doc = self._docs[key]
        new_key = doc.id if doc.id not in self._docs else f"{doc.id}#{uuid4()}"
        self._docs = {(new_key if k == key else k): d for k, d in self._docs.items()}
        logger.debug("re-keyed document %s -> %s", key, new_key)

    def save(self, doc: Document) -> Document:
        if not doc.id:
            doc.id = str(uuid4())

        key = self._key_of(doc.id)
        existing = self._docs.pop(key) if key is not None else None
        if doc.id in self._docs:
            self._rekey(doc.id)

        # created is fixed by the first save of an id; later saves never change it.
        if existing is not None and existing.created is not None:
            doc.created = existing.created
        elif doc.created is None:
            doc.created = datetime.now(timezone.utc)

        # Replaced documents move to the end of iteration order.
        self._docs[doc.id] = doc
        logger.debug("%s document %s", "replaced" if existing is not None else "created", doc.id)
        return doc

    def find_by_id(self, doc_id: str) -> Document | None:
        key = self._key_of(doc_id)
        return self._out(self._docs[key]) if key is not None else None

    def search(self, request: SearchRequest) -> list[Document]:
        results = [self._out(d) for d in self._docs.values() if matches(d, request)]
        logger.debug("search matched %d of %d documents", len(results), len(self._docs))
        return results

    def list_all(self) -> list[Document]:
        return [self._out(d) for d in self._docs.values()]
