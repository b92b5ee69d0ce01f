import logging

from document_manager.core.security import IdGenerator, make_id
from document_manager.db.repositories import DocumentRepository
from document_manager.domains.documents import (
    Author, Document, DocumentCreate, DocumentResponse, DocumentSearchResponse,
    SearchPredicate, SearchRequest
)
from document_manager.domains.documents.services import DocumentManager

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DocumentManager",
    "DocumentRepository",
    "Author", "Document",
    "DocumentCreate", "DocumentResponse", "DocumentSearchResponse",
    "SearchPredicate", "SearchRequest",
    "IdGenerator", "make_id"
]
