"""Recipe detail screen: the recipe, its favourite flag and count, and sharing."""

from recipes.deep_links import resolve_deep_link, share_payload
from recipes.exceptions import CookifyError
from recipes.repos.recipe_repo import RecipeRepo
from recipes.services.favourites import FavouriteService
from recipes.state.base import ScreenState
from recipes.sync import QueryKey


class RecipeDetailState(ScreenState):
    """
    Detail view for one recipe.

    Opened from a list, the recipe mapping is taken as handed over and not
    fetched again. Opened from a deep link, it is fetched once and must be
    approved.
    """

    def __init__(self, session, db, recipe=None, recipe_id=None, queries=None,
                 favourite_service=None):
        super().__init__(session, db, queries)
        self.favourites = favourite_service or FavouriteService(db)
        self.recipe = dict(recipe) if recipe else None
        self.recipe_id = (recipe or {}).get("id") or recipe_id or ""
        self.is_favourite = False
        self.toggling = False
        self.loading = True
        self.favourites_sync = self.sync_adapter()
        self._load()

    @classmethod
    def from_deep_link(cls, session, db, url, **kwargs):
        try:
            recipe_id = resolve_deep_link(url)
        except CookifyError:
            recipe_id = ""
        return cls(session, db, recipe_id=recipe_id, **kwargs)

    def _load(self):
        if not self.recipe_id:
            self.loading = False
            self.notify("validation", "Recipe data could not be loaded")
            return
        if self.recipe is None:
            ok, record = self.attempt(RecipeRepo(self.db).get_approved, self.recipe_id)
            if ok and record is None:
                self.notify("remote", "Recipe data could not be loaded")
            self.recipe = record
        if self.recipe is not None:
            self.favourites_sync.subscribe(QueryKey.recipe_favourites(self.recipe_id))
            ok, flag = self.attempt(self.favourites.is_favourite, self.recipe_id, self.session)
            if ok:
                self.is_favourite = flag
        if not self._closed:
            self.loading = False
            self.changed()

    @property
    def not_found(self):
        return not self.loading and self.recipe is None

    @property
    def favourites_count(self):
        return len(self.favourites_sync.data)

    def toggle_favourite(self):
        """Flip the favourite; the flag changes only once the write is committed."""
        if self.recipe is None or self.toggling:
            return self.is_favourite
        self.toggling = True
        try:
            ok, flag = self.attempt(self.favourites.toggle, self.recipe, self.session, self.is_favourite)
        finally:
            self.toggling = False
        if ok:
            self.is_favourite = flag
            self.changed()
        return self.is_favourite

    def share(self):
        if self.recipe is None:
            return None
        return share_payload({**self.recipe, "id": self.recipe_id})
