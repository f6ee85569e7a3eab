"""Search predicate: field-by-field matching of a Document against a SearchRequest"""

from docstore.core.models import Document, SearchRequest


def matches(document: Document, request: SearchRequest) -> bool:
    """Return True if ANY present criterion of request matches document.

    Criteria are OR-combined, not AND-combined: a document matching only the
    title prefix is returned even if its author is not in author_ids. Absent
    criteria contribute nothing, so a request with every field unset matches
    no document. Prefix and substring checks are case-sensitive; both date
    bounds are inclusive. Documents with no title/content/author/created
    never match the corresponding criterion.
    """
    matched = False

    if request.title_prefixes:
        matched |= document.title is not None and any(
            document.title.startswith(prefix) for prefix in request.title_prefixes
        )

    if request.contains_contents:
        matched |= document.content is not None and any(
            part in document.content for part in request.contains_contents
        )

    if request.author_ids:
        matched |= document.author is not None and document.author.id in request.author_ids

    if request.created_from is not None and document.created is not None:
        matched |= document.created >= request.created_from

    if request.created_to is not None and document.created is not None:
        matched |= document.created <= request.created_to

    return matched
