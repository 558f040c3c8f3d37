from .recipe import ModerationStatus, Recipe
from .comment import Comment
from .favourite import Favourite

__all__ = [
    "ModerationStatus",
    "Recipe",
    "Comment",
    "Favourite",
]
