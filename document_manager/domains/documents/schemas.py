from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class AuthorSchema(BaseModel):
    """Схема автора документа"""
    id: str = Field(..., min_length=1)
    name: str = ""

    model_config = ConfigDict(from_attributes=True)


class DocumentCreate(BaseModel):
    """Схема для создания документа"""
    title: str
    content: str = ""
    author: AuthorSchema
    id: Optional[str] = None
    created: Optional[datetime] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title cannot be empty')
        return v


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: str
    title: str
    content: str
    author: Optional[AuthorSchema] = None
    created: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SearchRequest(BaseModel):
    """Схема для поиска документов.

    Незаданное поле (None) не ограничивает выборку. Пустой список, наоборот,
    не пропускает ни одного документа по своему критерию. Обе границы по
    дате создания не включаются.
    """
    title_prefixes: Optional[List[str]] = None
    contains_contents: Optional[List[str]] = None
    author_ids: Optional[List[str]] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None

    # Принимаем и title_prefixes, и titlePrefixes
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())


class DocumentSearchResponse(BaseModel):
    """Схема для ответа с результатами поиска"""
    documents: List[DocumentResponse]
    total_found: int
    search_time_ms: int
