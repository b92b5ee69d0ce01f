from document_manager.domains.documents.entities import Author, Document
from document_manager.domains.documents.schemas import (
    AuthorSchema, DocumentCreate, DocumentResponse, DocumentSearchResponse, SearchRequest
)
from document_manager.domains.documents.search import SearchPredicate

__all__ = [
    "Author", "Document",
    "AuthorSchema", "DocumentCreate", "DocumentResponse", "DocumentSearchResponse",
    "SearchRequest",
    "SearchPredicate"
]
