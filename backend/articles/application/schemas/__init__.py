from .article import ArticleCreate, ArticleUpdate, ArticleResponse, AuthorSchema

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "AuthorSchema",
]
