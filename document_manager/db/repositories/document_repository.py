import logging
import threading
from typing import List, Optional, Tuple

from document_manager.core.config import settings
from document_manager.core.security import IdGenerator, id_generator as default_id_generator
from document_manager.domains.documents.entities import Document
from document_manager.domains.documents.schemas import SearchRequest
from document_manager.domains.documents.search import SearchPredicate

logger = logging.getLogger(__name__)


class DocumentRepository:
    """Репозиторий документов в памяти.

    Коллекция копируется при записи: писатели под блокировкой собирают
    новый кортеж и подменяют ссылку, читатели без блокировки проходят по
    снимку, который в это время не меняется.
    """

    def __init__(
        self,
        id_generator: Optional[IdGenerator] = None,
        copy_on_save: Optional[bool] = None
    ):
        self.id_generator = id_generator or default_id_generator
        self.copy_on_save = settings.copy_on_save if copy_on_save is None else copy_on_save
        self._documents: Tuple[Document, ...] = ()
        self._write_lock = threading.Lock()

    def save(self, document: Document) -> Document:
        """Сохранение документа (вставка или замена по id)"""
        if document is None:
            raise ValueError("Document is required")

        with self._write_lock:
            if not document.has_id():
                document.id = self.id_generator.make_id()

            stored = document.copy() if self.copy_on_save else document

            documents = list(self._documents)
            for index, existing in enumerate(documents):
                if existing.id == stored.id:
                    documents[index] = stored
                    logger.debug("Document %s replaced", stored.id)
                    break
            else:
                documents.append(stored)
                logger.debug("Document %s inserted", stored.id)
            self._documents = tuple(documents)

        return document

    def search(self, request: SearchRequest) -> List[Document]:
        """Поиск документов в порядке вставки"""
        predicate = SearchPredicate(request)
        return [self._export(document) for document in self._documents if predicate(document)]

    def find_by_id(self, id: Optional[str]) -> Optional[Document]:
        """Получение документа по id"""
        for document in self._documents:
            if document.id == id:
                return self._export(document)
        return None

    def get_all(self) -> List[Document]:
        """Получение всех документов"""
        return [self._export(document) for document in self._documents]

    def count(self) -> int:
        """Подсчет количества документов"""
        return len(self._documents)

    def count_search_results(self, request: SearchRequest) -> int:
        """Подсчет результатов поиска"""
        predicate = SearchPredicate(request)
        return sum(1 for document in self._documents if predicate(document))

    def _export(self, document: Document) -> Document:
        # В режиме копирования наружу уходят только копии хранимых документов
        return document.copy() if self.copy_on_save else document
