"""Service helpers for creating and deleting comments."""

import logging

from recipes.exceptions import PermissionDenied, ValidationFailed
from recipes.forms import CommentForm, first_error
from recipes.models.comment import ANONYMOUS_LABEL, Comment
from recipes.repos.comment_repo import CommentRepo
from recipes.utils.timestamps import now_millis

logger = logging.getLogger(__name__)


class CommentService:
    """Encapsulate comment create/delete for recipes."""

    def __init__(self, db):
        self.repo = CommentRepo(db)

    def create_comment(self, recipe_id, session, data):
        """Validate and add a comment; returns the new comment."""
        identity = session.require()
        form = CommentForm(data)
        if not form.is_valid():
            raise ValidationFailed(first_error(form))
        comment = Comment(
            recipe_id=recipe_id,
            user_id=identity.uid,
            user_email=identity.email or ANONYMOUS_LABEL,
            text=form.cleaned_data["text"],
            timestamp=now_millis(),
        )
        self.repo.add(comment)
        return comment

    def can_delete(self, comment, uid):
        """Return True when the user owns the comment."""
        return comment.is_authored_by(uid)

    def delete_comment(self, comment, session):
        """Delete the given comment; only its author may."""
        identity = session.require()
        if not self.can_delete(comment, identity.uid):
            raise PermissionDenied("You can only delete your own comments")
        self.repo.remove(comment.recipe_id, comment.id)
        logger.info("Comment %s on %s deleted by %s", comment.id, comment.recipe_id, identity.uid)
        return comment.recipe_id
