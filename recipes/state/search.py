"""Search screen with per-field filters."""

from dataclasses import replace

from recipes.search import SEARCHABLE_FIELDS, SearchFields, filter_records
from recipes.state.base import ScreenState
from recipes.sync import QueryKey


class SearchState(ScreenState):
    """Approved recipes filtered on every keystroke by the enabled fields."""

    def __init__(self, session, db, queries=None):
        super().__init__(session, db, queries)
        self.query = ""
        self.fields = SearchFields()
        self.filter_dialog_visible = False
        self.recipes_sync = self.sync_adapter()
        self.recipes_sync.subscribe(QueryKey.approved_recipes())

    @property
    def loading(self):
        return self.recipes_sync.loading

    def set_query(self, text):
        self.query = text or ""
        self.changed()

    def clear_query(self):
        self.set_query("")

    def set_field(self, name, enabled):
        if name not in SEARCHABLE_FIELDS:
            raise ValueError(f"Unknown search field: {name}")
        self.fields = replace(self.fields, **{name: bool(enabled)})
        self.changed()

    def toggle_field(self, name):
        self.set_field(name, name not in self.fields.enabled)

    def show_filters(self):
        self.filter_dialog_visible = True
        self.changed()

    def hide_filters(self):
        self.filter_dialog_visible = False
        self.changed()

    @property
    def filters_narrowed(self):
        """True when at least one field is switched off."""
        return not self.fields.all_enabled

    @property
    def results(self):
        return filter_records(self.recipes_sync.data, self.query, self.fields)

    @property
    def empty_message(self):
        if self.results:
            return None
        return "Type to search recipes" if not self.query else "Nothing found"

    def open_recipe(self, recipe):
        return dict(recipe)
