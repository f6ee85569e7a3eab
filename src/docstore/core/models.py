"""Value types for stored documents and search requests"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict


def _as_utc(value: datetime) -> datetime:
    """Read naive datetimes as UTC so created and the search bounds are always comparable."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class Author(BaseModel):
    """Creator of a document, attached by value."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """A stored record. id and created are optional on input and filled by save."""
    model_config = ConfigDict(validate_assignment=True)

    id:      Optional[str] = None
    title:   Optional[str] = None
    content: Optional[str] = None
    author:  Optional[Author] = None
    created: Optional[UtcDatetime] = None


class SearchRequest(BaseModel):
    """Five independent filter criteria; None or an empty list leaves a criterion unconstrained."""
    model_config = ConfigDict(frozen=True)

    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[UtcDatetime] = None
    created_to:        Optional[UtcDatetime] = None
