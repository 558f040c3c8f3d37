from .comment_form import CommentForm
from .log_in_form import CredentialsForm
from .recipe_forms import RecipeSubmissionForm

__all__ = [
    "CommentForm",
    "CredentialsForm",
    "RecipeSubmissionForm",
]


def first_error(form, default="Fill in the required fields"):
    """Return the first validation message of a bound, invalid form."""
    for messages in form.errors.values():
        if messages:
            return str(messages[0])
    return default
