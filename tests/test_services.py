"""Tests for the document manager facade."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from document_manager import DocumentManager
from document_manager.domains.documents.schemas import DocumentCreate, SearchRequest


class TestDocumentManager:
    def test_save_search_and_find(self, manager, alpha_report, t0) -> None:
        saved = manager.save(alpha_report)

        assert manager.find_by_id(saved.id) == alpha_report
        assert manager.search(SearchRequest(created_from=t0 - timedelta(hours=1))) == [alpha_report]
        assert manager.find_by_id("nonexistent") is None

    def test_default_repository(self, alpha_report) -> None:
        manager = DocumentManager()
        saved = manager.save(alpha_report)
        assert manager.find_by_id(saved.id) is alpha_report

    def test_create_document(self, manager, t0) -> None:
        document = manager.create_document(
            DocumentCreate(
                title="Alpha Report",
                content="quarterly results",
                author={"id": "a1", "name": "Alice"},
                created=t0,
            )
        )

        assert len(document.id) == 16
        assert document.created == t0
        assert document.author.name == "Alice"
        assert manager.find_by_id(document.id) is document

    def test_create_document_stamps_created(self, manager) -> None:
        document = manager.create_document(
            DocumentCreate(title="Notes", author={"id": "a1"})
        )
        assert document.created is not None

    def test_create_document_with_existing_id_upserts(self, manager) -> None:
        first = manager.create_document(DocumentCreate(id="doc-1", title="v1", author={"id": "a1"}))
        second = manager.create_document(DocumentCreate(id="doc-1", title="v2", author={"id": "a1"}))

        assert first.id == second.id == "doc-1"
        assert manager.find_by_id("doc-1").title == "v2"
        assert manager.document_repository.count() == 1

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "   ", "author": {"id": "a1"}},
            {"title": "Notes", "author": {"id": ""}},
            {"title": "Notes"},
        ],
    )
    def test_invalid_create_payload(self, payload) -> None:
        with pytest.raises(ValidationError):
            DocumentCreate(**payload)

    def test_search_documents(self, manager, sample_documents) -> None:
        for document in sample_documents:
            manager.save(document)

        response = manager.search_documents(SearchRequest(title_prefixes=["Foo"]))

        assert response.total_found == 2
        assert [d.title for d in response.documents] == ["Foobar", "Foo fighters"]
        assert response.documents[0].author.id == "a1"
        assert response.search_time_ms >= 0
