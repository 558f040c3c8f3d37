"""Service helpers for favourite toggling."""

import logging

from recipes.models.favourite import Favourite
from recipes.repos.favourite_repo import FavouriteRepo
from recipes.utils.timestamps import now_millis

logger = logging.getLogger(__name__)


class FavouriteService:
    """Encapsulate favourite reads and the mirrored add/remove."""

    def __init__(self, db):
        self.repo = FavouriteRepo(db)

    def is_favourite(self, recipe_id, session):
        """Return True when the signed-in user has favourited the recipe."""
        if not session.is_authenticated or not recipe_id:
            return False
        return self.repo.is_favourite(session.uid, recipe_id)

    def toggle(self, recipe, session, currently_favourite):
        """
        Flip the favourite and return the new flag.

        Both mirrored records are written (or deleted) in one batch, so the
        returned value only reflects a committed change.
        """
        identity = session.require()
        recipe_id = recipe["id"]
        if currently_favourite:
            self.repo.remove_pair(identity.uid, recipe_id)
            logger.info("Recipe %s removed from favourites of %s", recipe_id, identity.uid)
            return False
        favourite = Favourite(user_id=identity.uid, recipe_id=recipe_id, timestamp=now_millis())
        self.repo.add_pair(favourite, recipe)
        logger.info("Recipe %s added to favourites of %s", recipe_id, identity.uid)
        return True
