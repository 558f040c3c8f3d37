from .base import Notice, ScreenState
from .auth import AuthState
from .browse import RecipeListState
from .comments import CommentsState
from .detail import RecipeDetailState
from .favourites import FavouritesState
from .search import SearchState
from .submission import AddRecipeState

__all__ = [
    "Notice",
    "ScreenState",
    "AuthState",
    "RecipeListState",
    "CommentsState",
    "RecipeDetailState",
    "FavouritesState",
    "SearchState",
    "AddRecipeState",
]
