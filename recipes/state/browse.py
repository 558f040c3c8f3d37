"""Home screen: every approved recipe, narrowed by a quick search."""

from recipes.search import SearchFields, filter_records
from recipes.state.base import ScreenState
from recipes.sync import QueryKey

QUICK_SEARCH_FIELDS = SearchFields(title=True, ingredients=True, instructions=False)


class RecipeListState(ScreenState):
    """Approved recipes kept live, with a title/ingredients search box."""

    def __init__(self, session, db, queries=None):
        super().__init__(session, db, queries)
        self.search_query = ""
        self.recipes_sync = self.sync_adapter()
        self.recipes_sync.subscribe(QueryKey.approved_recipes())

    @property
    def requires_sign_in(self):
        return not self.session.is_authenticated

    @property
    def loading(self):
        return self.recipes_sync.loading

    def set_search_query(self, text):
        self.search_query = text or ""
        self.changed()

    @property
    def recipes(self):
        return filter_records(self.recipes_sync.data, self.search_query, QUICK_SEARCH_FIELDS)

    @property
    def empty_message(self):
        if self.recipes:
            return None
        return "No recipes yet" if not self.search_query else "Nothing found"

    def open_recipe(self, recipe):
        """Hand the whole record to the detail screen instead of re-fetching it."""
        return dict(recipe)

    def sign_out(self):
        self.session.sign_out()
