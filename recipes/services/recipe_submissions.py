"""Service helpers for submitting recipes to moderation."""

import logging

from recipes.exceptions import ValidationFailed
from recipes.forms import RecipeSubmissionForm, first_error
from recipes.repos.recipe_repo import RecipeRepo
from recipes.utils.timestamps import now_millis

logger = logging.getLogger(__name__)


class RecipeSubmissionService:
    """Validate a submission and write it to the moderation intake as pending."""

    def __init__(self, db, form_class=RecipeSubmissionForm):
        self.repo = RecipeRepo(db)
        self.form_class = form_class

    def submit(self, data, session):
        """Return the new submission id; nothing is written unless the form is valid and a user is signed in."""
        form = self.form_class(data)
        if not form.is_valid():
            raise ValidationFailed(first_error(form), errors=form.errors.get_json_data())
        identity = session.require()
        recipe = form.to_recipe(author_id=identity.uid, timestamp=now_millis())
        submission_id = self.repo.submit(recipe)
        logger.info("Recipe %s submitted for moderation by %s", submission_id, identity.uid)
        return submission_id
