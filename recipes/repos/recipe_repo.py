"""Repository helpers for published recipes and moderation intake."""

from typing import Any, Dict, List, Optional

from recipes.db_accessor import DB_Accessor
from recipes.models.recipe import ModerationStatus, Recipe, is_approved

RECIPES = ("recipes",)
PENDING_RECIPES = ("recipes_pending",)


class RecipeRepo(DB_Accessor):
    """Repository for recipe reads (approved only) and submissions (pending only)."""

    def approved_query(self):
        """Live-queryable set of recipes that passed moderation."""
        return self.query(RECIPES, filters={"status": ModerationStatus.APPROVED.value})

    def list_approved(self) -> List[Dict[str, Any]]:
        return [record for record in self.list(RECIPES, filters={"status": ModerationStatus.APPROVED.value})
                if is_approved(record)]

    def get_approved(self, recipe_id: str) -> Optional[Dict[str, Any]]:
        """Return the recipe record, or None when it is missing or not approved."""
        if not recipe_id:
            return None
        record = self.get(RECIPES, recipe_id)
        if record is None or not is_approved(record):
            return None
        return record

    def submit(self, recipe: Recipe) -> str:
        """Write a submission to the moderation intake; status is always pending."""
        recipe.status = ModerationStatus.PENDING
        recipe.moderator_comment = ""
        recipe.id = self.create(PENDING_RECIPES, recipe.to_document())
        return recipe.id

    def get_pending(self, submission_id: str) -> Optional[Dict[str, Any]]:
        return self.get(PENDING_RECIPES, submission_id)
