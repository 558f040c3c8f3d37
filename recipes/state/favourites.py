"""Favourites screen: the signed-in user's saved recipes."""

from recipes.state.base import ScreenState
from recipes.sync import QueryKey


class FavouritesState(ScreenState):
    """User favourites kept live and re-keyed whenever the session changes."""

    def __init__(self, session, db, queries=None):
        super().__init__(session, db, queries)
        self.favourites_sync = self.sync_adapter()
        self.on_close(session.add_listener(self._on_session_changed))
        self.favourites_sync.subscribe(QueryKey.user_favourites(session.uid))

    def _on_session_changed(self, identity):
        self.favourites_sync.subscribe(QueryKey.user_favourites(identity.uid if identity else None))

    @property
    def loading(self):
        return self.favourites_sync.loading

    @property
    def favourites(self):
        return self.favourites_sync.data

    @property
    def empty_message(self):
        if self.loading or self.favourites:
            return None
        return "No favourite recipes"

    def open_recipe(self, favourite):
        """Detail screen handoff; favourites are keyed by the recipe id."""
        recipe = dict(favourite)
        recipe["id"] = favourite.get("recipeId") or favourite.get("id")
        return recipe
