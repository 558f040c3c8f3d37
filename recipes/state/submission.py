"""Add-recipe screen."""

from recipes.services.recipe_submissions import RecipeSubmissionService
from recipes.state.base import ScreenState

SUBMITTED_MESSAGE = "Recipe sent for moderation!"


class AddRecipeState(ScreenState):
    """Form fields for a new recipe; a valid submission lands in moderation."""

    def __init__(self, session, db, queries=None, submission_service=None):
        super().__init__(session, db, queries)
        self.service = submission_service or RecipeSubmissionService(db)
        self.title = ""
        self.ingredients = ""
        self.instructions = ""
        self.submission_id = None

    @property
    def finished(self):
        return self.submission_id is not None

    def update(self, **fields):
        for name in ("title", "ingredients", "instructions"):
            if name in fields:
                setattr(self, name, fields[name] or "")
        self.changed()

    def submit(self):
        data = {
            "title": self.title,
            "ingredients": self.ingredients,
            "instructions": self.instructions,
        }
        ok, submission_id = self.attempt(self.service.submit, data, self.session)
        if ok:
            self.submission_id = submission_id
            self.notify("info", SUBMITTED_MESSAGE)
        return ok
