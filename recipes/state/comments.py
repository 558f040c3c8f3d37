"""Comments screen for one recipe."""

from recipes.models.comment import ANONYMOUS_LABEL, Comment
from recipes.services.comments import CommentService
from recipes.state.base import ScreenState
from recipes.sync import QueryKey


class CommentsState(ScreenState):
    """Live newest-first comments with a draft box, reply and delete."""

    def __init__(self, session, db, recipe_id, queries=None, comment_service=None):
        super().__init__(session, db, queries)
        self.recipe_id = recipe_id
        self.service = comment_service or CommentService(db)
        self.draft = ""
        self.comments_sync = self.sync_adapter()
        self.comments_sync.subscribe(QueryKey.comments(recipe_id))

    @property
    def loading(self):
        return self.comments_sync.loading

    @property
    def comments(self):
        return [Comment.from_record(record, self.recipe_id) for record in self.comments_sync.data]

    @property
    def input_enabled(self):
        return self.session.is_authenticated

    def can_delete(self, comment):
        """Whether to offer the delete action for this comment."""
        return self.service.can_delete(comment, self.session.uid)

    def set_draft(self, text):
        self.draft = text or ""
        self.changed()

    def reply_to(self, comment):
        self.set_draft(f"{comment.user_email or ANONYMOUS_LABEL}, ")

    def submit(self):
        ok, comment = self.attempt(self.service.create_comment, self.recipe_id, self.session, {"text": self.draft})
        if ok:
            self.draft = ""
            self.changed()
        return comment

    def delete(self, comment):
        if not self.can_delete(comment):
            self.notify("permission", "You can only delete your own comments")
            return False
        ok, _ = self.attempt(self.service.delete_comment, comment, self.session)
        return ok
