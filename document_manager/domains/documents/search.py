from document_manager.domains.documents.entities import Document
from document_manager.domains.documents.schemas import SearchRequest


class SearchPredicate:
    """Проверка одного документа на соответствие поисковому запросу.

    Документ подходит, только если выполнены все критерии; внутри
    критерия со списком значений достаточно совпадения с любым из них.
    """

    def __init__(self, request: SearchRequest):
        if request is None:
            raise ValueError("Search request is required")
        self.request = request

    def __call__(self, document: Document) -> bool:
        return (
            self.title_matches(document)
            and self.content_matches(document)
            and self.author_matches(document)
            and self.created_from_matches(document)
            and self.created_to_matches(document)
        )

    def title_matches(self, document: Document) -> bool:
        prefixes = self.request.title_prefixes
        if prefixes is None:
            return True
        return any(document.title.startswith(prefix) for prefix in prefixes)

    def content_matches(self, document: Document) -> bool:
        substrings = self.request.contains_contents
        if substrings is None:
            return True
        return any(substring in document.content for substring in substrings)

    def author_matches(self, document: Document) -> bool:
        author_ids = self.request.author_ids
        if author_ids is None:
            return True
        return any(author_id == document.author.id for author_id in author_ids)

    def created_from_matches(self, document: Document) -> bool:
        created_from = self.request.created_from
        return created_from is None or document.created > created_from

    def created_to_matches(self, document: Document) -> bool:
        created_to = self.request.created_to
        return created_to is None or document.created < created_to
