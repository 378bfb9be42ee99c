"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field, HttpUrl

from articles.domain.entities import Article, Author
from articles.domain.exceptions import ArticleNotPersistedError


class AuthorSchema(BaseModel):
    """Author as carried inside article payloads."""

    name: str = Field(..., min_length=1, examples=["Ada Lovelace"])
    email: str | None = Field(None, examples=["ada@example.com"])
    id: int | None = None

    def to_entity(self) -> Author:
        return Author(name=self.name, email=self.email, id=self.id)


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    markdown_content: str = Field(..., min_length=1, examples=["# Hello\n\nFirst post."])
    cover_image: HttpUrl | None = Field(None, examples=["https://cdn.example.com/cover.jpg"])
    author: AuthorSchema
    state: str | None = Field(None, examples=["draft"])


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    markdown_content: str | None = Field(None, min_length=1)
    cover_image: HttpUrl | None = None
    author: AuthorSchema | None = None


class ArticleResponse(BaseModel):
    """Schema returned to callers; state is flattened to its label."""

    id: int
    title: str
    markdown_content: str
    cover_image: str | None
    created: datetime
    author: AuthorSchema
    state: str

    @classmethod
    def from_entity(cls, article: Article) -> "ArticleResponse":
        if not article.is_persisted:
            raise ArticleNotPersistedError(article.title)
        return cls(
            id=article.id,
            title=article.title,
            markdown_content=article.markdown_content,
            cover_image=article.cover_image,
            created=article.created,
            author=AuthorSchema(
                name=article.author.name,
                email=article.author.email,
                id=article.author.id,
            ),
            state=article.state.state(),
        )
