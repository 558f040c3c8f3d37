"""Repository helpers for recipe comments."""

from recipes.db_accessor import DB_Accessor
from recipes.models.comment import Comment


def comments_path(recipe_id: str):
    return ("recipes", recipe_id, "comments")


class CommentRepo(DB_Accessor):
    """Repository for the `recipes/{id}/comments` sub-collection."""

    def newest_first_query(self, recipe_id: str):
        return self.query(comments_path(recipe_id), order_by=("-timestamp",))

    def add(self, comment: Comment) -> str:
        comment.id = self.create(comments_path(comment.recipe_id), comment.to_document())
        return comment.id

    def remove(self, recipe_id: str, comment_id: str) -> None:
        self.delete(comments_path(recipe_id), comment_id)
