from django.test import SimpleTestCase

from recipes.exceptions import InvalidTransition, RemoteError
from recipes.services.moderation import ModerationService
from recipes.tests.helpers import FakeFirestore


class ModerationServiceTests(SimpleTestCase):

    def setUp(self):
        self.db = FakeFirestore()
        self.db.seed(
            "recipes_pending", "p1",
            title="Tea", ingredients="leaves", instructions="boil",
            authorId="alice", timestamp=5, status="pending", moderatorComment="",
        )
        self.service = ModerationService(self.db)

    def test_approve_publishes_and_clears_intake(self):
        recipe = self.service.approve("p1", moderator_comment="Looks good")

        published = self.db.collection_data("recipes")["p1"]
        self.assertEqual(published["status"], "approved")
        self.assertEqual(published["moderatorComment"], "Looks good")
        self.assertEqual(published["authorId"], "alice")
        self.assertNotIn("p1", self.db.collection_data("recipes_pending"))
        self.assertEqual(recipe.id, "p1")

    def test_unknown_submission(self):
        with self.assertRaises(InvalidTransition):
            self.service.approve("missing")

    def test_failed_commit_leaves_submission_pending(self):
        self.db.fail("commit")
        with self.assertRaises(RemoteError):
            self.service.approve("p1")
        self.assertIn("p1", self.db.collection_data("recipes_pending"))
        self.assertEqual(self.db.collection_data("recipes"), {})
