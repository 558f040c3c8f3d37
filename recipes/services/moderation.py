"""The single moderation transition: publish a pending submission."""

import logging

from recipes.exceptions import InvalidTransition
from recipes.models.recipe import Recipe
from recipes.repos.recipe_repo import PENDING_RECIPES, RECIPES, RecipeRepo

logger = logging.getLogger(__name__)


class ModerationService:
    """Move a submission from `recipes_pending` to `recipes` as approved."""

    def __init__(self, db):
        self.repo = RecipeRepo(db)

    def approve(self, submission_id, moderator_comment=""):
        record = self.repo.get_pending(submission_id)
        if record is None:
            raise InvalidTransition(f"No pending recipe {submission_id}")
        recipe = Recipe.from_record(record)
        recipe.status = recipe.status.approve()
        recipe.moderator_comment = moderator_comment

        batch = self.repo.batch()
        batch.set(self.repo.document(RECIPES, submission_id), recipe.to_document())
        batch.delete(self.repo.document(PENDING_RECIPES, submission_id))
        self.repo.commit(batch, RECIPES)
        logger.info("Recipe %s approved", submission_id)
        recipe.id = submission_id
        return recipe
