from django.apps import AppConfig

class RecipesConfig(AppConfig):
    """Django app config for the Cookify client core."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'recipes'
