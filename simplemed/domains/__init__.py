"""Domain layer (scan document model, display and share helpers).

Domain modules do no IO and do not depend on UI; they only turn decoded JSON
into immutable values and format those values for consumers.
"""

from simplemed.domains.models import (
    Document,
    DocumentDecodeError,
    Logistics,
    Media,
    Meta,
    Preparation,
    Safety,
    Scan,
    SearchResult,
    Section,
    empty_document,
    parse_document,
    parse_document_text,
)

__all__ = [
    "Document",
    "DocumentDecodeError",
    "Logistics",
    "Media",
    "Meta",
    "Preparation",
    "Safety",
    "Scan",
    "SearchResult",
    "Section",
    "empty_document",
    "parse_document",
    "parse_document_text",
]
