"""Article use cases."""

from .create_article import (
    CreateArticleRequest,
    CreateArticleResponse,
    CreateArticleUseCase,
)
from .delete_article import DeleteArticleRequest, DeleteArticleUseCase
from .favorite_article import (
    FavoriteArticleRequest,
    FavoriteArticleResponse,
    FavoriteArticleUseCase,
    UnfavoriteArticleUseCase,
)
from .feed_articles import FeedArticlesRequest, FeedArticlesUseCase
from .get_article import GetArticleRequest, GetArticleResponse, GetArticleUseCase
from .list_articles import (
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
)
from .update_article import (
    UpdateArticleRequest,
    UpdateArticleResponse,
    UpdateArticleUseCase,
)

__all__ = [
    "CreateArticleRequest",
    "CreateArticleResponse",
    "CreateArticleUseCase",
    "DeleteArticleRequest",
    "DeleteArticleUseCase",
    "FavoriteArticleRequest",
    "FavoriteArticleResponse",
    "FavoriteArticleUseCase",
    "FeedArticlesRequest",
    "FeedArticlesUseCase",
    "GetArticleRequest",
    "GetArticleResponse",
    "GetArticleUseCase",
    "ListArticlesRequest",
    "ListArticlesResponse",
    "ListArticlesUseCase",
    "UnfavoriteArticleUseCase",
    "UpdateArticleRequest",
    "UpdateArticleResponse",
    "UpdateArticleUseCase",
]
