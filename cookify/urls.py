"""
URL configuration for the cookify project.

`recipe/<id>/` is the path deep links point at; the last segment is the
recipe id.
"""
from django.urls import path
from recipes.views import RecipeDetailApi, RecipeListApi, ShareRecipeApi

urlpatterns = [
    path('recipe/<str:recipe_id>/', RecipeDetailApi.as_view(), name='recipe_detail'),
    path('recipe/<str:recipe_id>/share/', ShareRecipeApi.as_view(), name='recipe_share'),
    path('api/recipes/', RecipeListApi.as_view(), name='recipe_list_api'),
]
