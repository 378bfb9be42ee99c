"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .article_state import ArticleState, DraftState


@dataclass
class Author:
    """Author embedded by value in an article."""

    name: str
    email: str | None = None
    id: int | None = None


@dataclass
class Article:
    """Core domain entity representing a single markdown article.

    ``id`` is assigned by the persistence layer; ``None`` (or a legacy ``0``)
    marks a transient article that has never been stored. ``created`` is set
    once at construction and never changed by ``update``.
    """

    title: str
    markdown_content: str
    author: Author
    cover_image: str | None = None
    id: int | None = None
    created: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    state: ArticleState = field(default_factory=DraftState)

    @property
    def is_persisted(self) -> bool:
        return bool(self.id)

    def update(
        self,
        title: str | None = None,
        markdown_content: str | None = None,
        cover_image: str | None = None,
        author: Author | None = None,
    ) -> None:
        """Update the given fields, leaving all others untouched."""
        if title is not None:
            self.title = title
        if markdown_content is not None:
            self.markdown_content = markdown_content
        if cover_image is not None:
            self.cover_image = cover_image
        if author is not None:
            self.author = author

    def remove_cover_image(self) -> None:
        self.cover_image = None

    def change_state(self, state: ArticleState) -> None:
        self.state = state
