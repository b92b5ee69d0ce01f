from datetime import datetime, timedelta, timezone

import pytest

from document_manager.db.repositories import DocumentRepository
from document_manager.domains.documents.entities import Author, Document
from document_manager.domains.documents.services import DocumentManager


@pytest.fixture
def t0() -> datetime:
    """Base creation time for sample documents."""
    return datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def repository() -> DocumentRepository:
    return DocumentRepository(copy_on_save=False)


@pytest.fixture
def manager(repository: DocumentRepository) -> DocumentManager:
    return DocumentManager(repository)


@pytest.fixture
def alpha_report(t0: datetime) -> Document:
    return Document(
        title="Alpha Report",
        content="quarterly results",
        author=Author(id="a1", name="Alice"),
        created=t0,
    )


@pytest.fixture
def sample_documents(t0: datetime) -> list:
    """Three documents by two authors, one hour apart."""
    return [
        Document(
            title="Foobar",
            content="first draft of the plan",
            author=Author(id="a1", name="Alice"),
            created=t0,
        ),
        Document(
            title="barFoo",
            content="meeting notes",
            author=Author(id="a2", name="Bob"),
            created=t0 + timedelta(hours=1),
        ),
        Document(
            title="Foo fighters",
            content="plan for the concert",
            author=Author(id="a2", name="Bob"),
            created=t0 + timedelta(hours=2),
        ),
    ]


@pytest.fixture
def populated_repository(repository: DocumentRepository, sample_documents) -> DocumentRepository:
    for document in sample_documents:
        repository.save(document)
    return repository
