from .article import Article, Author
from .article_state import (
    ArticleState,
    DraftState,
    PublishedState,
    ArchivedState,
    article_state_from_label,
    register_article_state,
    registered_article_states,
)

__all__ = [
    "Article",
    "Author",
    "ArticleState",
    "DraftState",
    "PublishedState",
    "ArchivedState",
    "article_state_from_label",
    "register_article_state",
    "registered_article_states",
]
