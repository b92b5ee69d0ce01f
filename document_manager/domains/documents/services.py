import logging
import time
from typing import List, Optional

from document_manager.db.repositories.document_repository import DocumentRepository
from document_manager.domains.documents.entities import Author, Document
from document_manager.domains.documents.schemas import (
    DocumentCreate, DocumentResponse, DocumentSearchResponse, SearchRequest
)

logger = logging.getLogger(__name__)


class DocumentManager:
    """Сервис для работы с документами"""

    def __init__(self, repository: Optional[DocumentRepository] = None):
        self.document_repository = repository or DocumentRepository()

    def save(self, document: Document) -> Document:
        """Сохранение документа; id создается, если его нет, created не меняется"""
        return self.document_repository.save(document)

    def search(self, request: SearchRequest) -> List[Document]:
        """Поиск документов по запросу"""
        return self.document_repository.search(request)

    def find_by_id(self, id: Optional[str]) -> Optional[Document]:
        """Получение документа по id"""
        return self.document_repository.find_by_id(id)

    def create_document(self, document_data: DocumentCreate) -> Document:
        """Создание нового документа из схемы"""
        document = Document.create_document(
            title=document_data.title,
            content=document_data.content,
            author=Author(id=document_data.author.id, name=document_data.author.name),
            created=document_data.created
        )
        document.id = document_data.id
        return self.save(document)

    def search_documents(self, search_request: SearchRequest) -> DocumentSearchResponse:
        """Поиск документов с замером времени"""
        start_time = time.perf_counter()

        documents = self.document_repository.search(search_request)

        search_time = int((time.perf_counter() - start_time) * 1000)  # в миллисекундах
        logger.debug("Search matched %d documents in %d ms", len(documents), search_time)

        return DocumentSearchResponse(
            documents=[DocumentResponse.model_validate(document) for document in documents],
            total_found=len(documents),
            search_time_ms=search_time
        )
