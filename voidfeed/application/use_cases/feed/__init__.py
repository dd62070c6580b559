from .add_comment import AddCommentUseCase
from .create_post import CreatePostUseCase
from .list_posts import ListPostsUseCase
from .toggle_like import ToggleLikeUseCase

__all__ = [
    "AddCommentUseCase",
    "CreatePostUseCase",
    "ListPostsUseCase",
    "ToggleLikeUseCase",
]
