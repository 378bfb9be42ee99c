"""Application service (use case) for Article operations."""

import logging

from articles.application.interfaces import ArticleRepository
from articles.application.schemas import ArticleCreate, ArticleUpdate
from articles.config import Settings, get_settings
from articles.domain.entities import Article, article_state_from_label
from articles.domain.exceptions import ArticleNotPersistedError, EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository, settings: Settings | None = None):
        self._repository = repository
        self._settings = settings or get_settings()

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self, skip: int = 0, limit: int = 100) -> list[Article]:
        return await self._repository.get_all(skip=skip, limit=self._page_size(limit))

    async def list_articles_by_state(
        self, label: str, skip: int = 0, limit: int = 100
    ) -> list[Article]:
        article_state_from_label(label)
        return await self._repository.get_by_state(
            label, skip=skip, limit=self._page_size(limit)
        )

    async def create_article(self, data: ArticleCreate) -> Article:
        state = article_state_from_label(data.state or self._settings.default_article_state)
        article = Article(
            title=data.title,
            markdown_content=data.markdown_content,
            cover_image=str(data.cover_image) if data.cover_image else None,
            author=data.author.to_entity(),
            state=state,
        )
        created = await self._repository.create(article)
        # Repositories must assign a non-zero id on create.
        if not created.is_persisted:
            raise ArticleNotPersistedError(created.title)
        logger.info(
            "Created article id=%s title=%r state=%s",
            created.id, created.title, created.state.state(),
        )
        return created

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)
        article.update(
            title=data.title,
            markdown_content=data.markdown_content,
            cover_image=str(data.cover_image) if data.cover_image else None,
            author=data.author.to_entity() if data.author else None,
        )
        # An explicit null clears the cover; an omitted field leaves it alone.
        if "cover_image" in data.model_fields_set and data.cover_image is None:
            article.remove_cover_image()
        updated = await self._repository.update(article)
        logger.info("Updated article id=%s", article_id)
        return updated

    async def change_state(self, article_id: int, label: str) -> Article:
        state = article_state_from_label(label)
        article = await self.get_article(article_id)
        previous = article.state.state()
        article.change_state(state)
        updated = await self._repository.update(article)
        logger.info("Article id=%s state %s -> %s", article_id, previous, label)
        return updated

    async def delete_article(self, article_id: int) -> bool:
        exists = await self._repository.get_by_id(article_id)
        if exists is None:
            raise EntityNotFoundError("Article", article_id)
        deleted = await self._repository.delete(article_id)
        logger.info("Deleted article id=%s", article_id)
        return deleted

    def _page_size(self, limit: int) -> int:
        return max(0, min(limit, self._settings.max_page_size))
