from .api_views import RecipeDetailApi, RecipeListApi, ShareRecipeApi

__all__ = [
    "RecipeDetailApi",
    "RecipeListApi",
    "ShareRecipeApi",
]
