from unittest.mock import MagicMock

from django.test import SimpleTestCase

from recipes.exceptions import RemoteError
from recipes.state import RecipeDetailState
from recipes.tests.helpers import FakeFirestore, make_session, seed_recipe


class RecipeDetailStateTests(SimpleTestCase):

    def setUp(self):
        self.db = FakeFirestore()
        seed_recipe(self.db, "r1", title="Tea", ingredients="water leaves")
        self.session = make_session("alice")

    def _handoff(self):
        return {"id": "r1", "title": "Tea", "ingredients": "water leaves", "status": "approved"}

    def test_handed_over_recipe_is_not_refetched(self):
        state = RecipeDetailState(self.session, self.db, recipe=self._handoff())

        self.assertNotIn(("get", "recipes/r1"), self.db.reads)
        self.assertEqual(state.recipe["title"], "Tea")
        self.assertFalse(state.loading)
        state.close()

    def test_deep_link_fetches_once(self):
        state = RecipeDetailState.from_deep_link(self.session, self.db, "https://cookify-84195.web.app/recipe/r1")

        self.assertEqual(self.db.reads.count(("get", "recipes/r1")), 1)
        self.assertEqual(state.recipe_id, "r1")
        self.assertEqual(state.recipe["title"], "Tea")
        state.close()

    def test_deep_link_to_pending_recipe_is_not_found(self):
        seed_recipe(self.db, "p1", status="pending")
        state = RecipeDetailState.from_deep_link(self.session, self.db, "https://cookify-84195.web.app/recipe/p1")

        self.assertTrue(state.not_found)
        self.assertEqual(state.last_notice.message, "Recipe data could not be loaded")
        state.close()

    def test_bad_deep_link(self):
        state = RecipeDetailState.from_deep_link(self.session, self.db, "https://cookify-84195.web.app/")
        self.assertTrue(state.not_found)
        self.assertEqual(state.last_notice.kind, "validation")
        state.close()

    def test_toggle_sets_flag_and_count_follows_snapshot(self):
        state = RecipeDetailState(self.session, self.db, recipe=self._handoff())
        self.assertFalse(state.is_favourite)
        self.assertEqual(state.favourites_count, 0)

        state.toggle_favourite()

        self.assertTrue(state.is_favourite)
        self.assertEqual(state.favourites_count, 1)

        state.toggle_favourite()

        self.assertFalse(state.is_favourite)
        self.assertEqual(state.favourites_count, 0)
        state.close()

    def test_existing_favourite_is_loaded(self):
        self.db.seed("users/alice/favorites", "r1", title="Tea")
        state = RecipeDetailState(self.session, self.db, recipe=self._handoff())
        self.assertTrue(state.is_favourite)
        state.close()

    def test_failed_toggle_keeps_flag_and_reports(self):
        state = RecipeDetailState(self.session, self.db, recipe=self._handoff())
        self.db.fail("commit")

        state.toggle_favourite()

        self.assertFalse(state.is_favourite)
        self.assertEqual(state.last_notice.kind, "remote")
        state.close()

    def test_toggle_without_session(self):
        state = RecipeDetailState(make_session(None), self.db, recipe=self._handoff())

        state.toggle_favourite()

        self.assertFalse(state.is_favourite)
        self.assertEqual(state.last_notice.kind, "auth")
        self.assertEqual(self.db.writes, [])
        state.close()

    def test_result_after_close_is_ignored(self):
        service = MagicMock()
        service.is_favourite.return_value = False
        state = RecipeDetailState(self.session, self.db, recipe=self._handoff(), favourite_service=service)

        def toggle_then_close(*args):
            state.close()
            return True
        service.toggle.side_effect = toggle_then_close

        state.toggle_favourite()

        self.assertFalse(state.is_favourite)

    def test_remote_error_on_fetch(self):
        self.db.fail("get")
        state = RecipeDetailState(self.session, self.db, recipe_id="r1")
        self.assertTrue(state.not_found)
        self.assertEqual(state.last_notice.message, RemoteError.default_message)
        state.close()

    def test_share_payload(self):
        state = RecipeDetailState(self.session, self.db, recipe=self._handoff())
        payload = state.share()
        self.assertEqual(payload["subject"], "Tea")
        self.assertIn("https://cookify-84195.web.app/recipe/r1", payload["text"])
        state.close()
