from datetime import datetime, timezone
from typing import Optional


class Author:
    """Автор документа (объект-значение)"""

    def __init__(self, id: str, name: str = ""):
        self.id = id
        self.name = name

    def copy(self) -> "Author":
        return Author(id=self.id, name=self.name)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Author):
            return False
        return self.id == other.id and self.name == other.name

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name={self.name})"


class Document:
    """Сущность документа.

    Идентификатор назначается хранилищем при первом сохранении, поле
    created задаёт вызывающий, и хранилище его не меняет.
    """

    def __init__(
        self,
        title: str,
        content: str = "",
        author: Optional[Author] = None,
        created: Optional[datetime] = None,
        id: Optional[str] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.author = author
        self.created = created

    @classmethod
    def create_document(
        cls,
        title: str,
        author: Author,
        content: str = "",
        created: Optional[datetime] = None
    ) -> "Document":
        """Создание нового документа без идентификатора"""
        return cls(
            title=title,
            content=content,
            author=author,
            created=created or datetime.now(timezone.utc)
        )

    def has_id(self) -> bool:
        return self.id is not None

    def with_changes(self, **changes) -> "Document":
        """Копия документа с заменой указанных полей"""
        unknown = set(changes) - {"id", "title", "content", "author", "created"}
        if unknown:
            raise TypeError(f"Unknown document fields: {', '.join(sorted(unknown))}")
        fields = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "author": self.author.copy() if self.author else None,
            "created": self.created,
        }
        fields.update(changes)
        return Document(**fields)

    def copy(self) -> "Document":
        """Независимая копия документа вместе с автором"""
        return self.with_changes()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return (
            self.id == other.id
            and self.title == other.title
            and self.content == other.content
            and self.author == other.author
            and self.created == other.created
        )

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title}, created={self.created})"
