"""Firestore-backed live queries resolved from QueryKeys."""

import logging
from typing import Callable, Iterable, Optional

from recipes.db_accessor import to_record
from recipes.models.recipe import ModerationStatus, is_approved
from recipes.repos.comment_repo import CommentRepo
from recipes.repos.favourite_repo import FavouriteRepo
from recipes.repos.recipe_repo import RecipeRepo
from recipes.sync import QueryKey, Record

logger = logging.getLogger(__name__)


def normalize_recipe(snapshot) -> Optional[Record]:
    record = to_record(snapshot)
    return record if is_approved(record) else None


def normalize_favourite(snapshot) -> Record:
    """User-side favourites are keyed by recipe id and predate the status field."""
    record = to_record(snapshot)
    record["recipeId"] = snapshot.id
    record.setdefault("status", ModerationStatus.APPROVED.value)
    return record


class FirestoreLiveQuery:
    """Adapts `Query.on_snapshot` to the listen(on_records, on_error) contract."""

    def __init__(self, query, normalize: Callable = to_record):
        self.query = query
        self.normalize = normalize

    def records(self, snapshots: Iterable) -> list:
        records = []
        for snapshot in snapshots:
            record = self.normalize(snapshot)
            if record is not None:
                records.append(record)
        return records

    def listen(self, on_records, on_error):
        def on_snapshot(snapshots, changes, read_time):
            try:
                records = self.records(snapshots)
            except Exception as e:
                on_error(e)
                return
            on_records(records)

        return self.query.on_snapshot(on_snapshot)


class LiveQueries:
    """Resolve a QueryKey to the Firestore query behind it."""

    def __init__(self, db):
        self.recipes = RecipeRepo(db)
        self.comments = CommentRepo(db)
        self.favourites = FavouriteRepo(db)

    def resolve(self, key: QueryKey) -> FirestoreLiveQuery:
        if key.name == QueryKey.APPROVED_RECIPES:
            return FirestoreLiveQuery(self.recipes.approved_query(), normalize_recipe)
        if key.name == QueryKey.COMMENTS:
            return FirestoreLiveQuery(self.comments.newest_first_query(key.param))
        if key.name == QueryKey.RECIPE_FAVOURITES:
            return FirestoreLiveQuery(self.favourites.for_recipe_query(key.param))
        if key.name == QueryKey.USER_FAVOURITES:
            return FirestoreLiveQuery(self.favourites.for_user_query(key.param), normalize_favourite)
        raise ValueError(f"Unknown live query: {key.name}")
