"""Repository helpers for the mirrored favourite records."""

from typing import Any, Mapping

from recipes.db_accessor import DB_Accessor
from recipes.models.favourite import Favourite


def user_favourites_path(uid: str):
    return ("users", uid, "favorites")


def recipe_favourites_path(recipe_id: str):
    return ("recipes", recipe_id, "favorites")


class FavouriteRepo(DB_Accessor):
    """Repository keeping `users/{uid}/favorites` and `recipes/{id}/favorites` in step."""

    def for_user_query(self, uid: str):
        return self.query(user_favourites_path(uid))

    def for_recipe_query(self, recipe_id: str):
        return self.query(recipe_favourites_path(recipe_id))

    def is_favourite(self, uid: str, recipe_id: str) -> bool:
        return self.exists(user_favourites_path(uid), recipe_id)

    def add_pair(self, favourite: Favourite, recipe_fields: Mapping[str, Any]) -> None:
        """Write both mirrored records in one atomic batch."""
        batch = self.batch()
        batch.set(
            self.document(user_favourites_path(favourite.user_id), favourite.recipe_id),
            favourite.user_document(recipe_fields),
        )
        batch.set(
            self.document(recipe_favourites_path(favourite.recipe_id), favourite.user_id),
            favourite.recipe_document(),
        )
        self.commit(batch, recipe_favourites_path(favourite.recipe_id))

    def remove_pair(self, uid: str, recipe_id: str) -> None:
        """Delete both mirrored records in one atomic batch."""
        batch = self.batch()
        batch.delete(self.document(user_favourites_path(uid), recipe_id))
        batch.delete(self.document(recipe_favourites_path(recipe_id), uid))
        self.commit(batch, recipe_favourites_path(recipe_id))
