from django.test import SimpleTestCase

from recipes.exceptions import NotAuthenticated, RemoteError
from recipes.state import AddRecipeState, AuthState
from recipes.tests.helpers import FakeAuthBackend, FakeFirestore, make_session


class AddRecipeStateTests(SimpleTestCase):

    def setUp(self):
        self.db = FakeFirestore()
        self.state = AddRecipeState(make_session("alice"), self.db)

    def tearDown(self):
        self.state.close()

    def test_valid_submission_goes_to_moderation(self):
        self.state.update(title="Tea", ingredients="water leaves", instructions="boil")

        self.assertTrue(self.state.submit())

        self.assertTrue(self.state.finished)
        self.assertEqual(self.state.last_notice.message, "Recipe sent for moderation!")
        stored = self.db.collection_data("recipes_pending")[self.state.submission_id]
        self.assertEqual(stored["status"], "pending")

    def test_empty_ingredients_writes_nothing(self):
        self.state.update(title="Tea", ingredients="")

        self.assertFalse(self.state.submit())

        self.assertEqual(self.db.writes, [])
        self.assertEqual(self.state.last_notice.kind, "validation")
        self.assertFalse(self.state.finished)

    def test_signed_out_submission(self):
        state = AddRecipeState(make_session(None), self.db)
        state.update(title="Tea", ingredients="leaves")
        self.assertFalse(state.submit())
        self.assertEqual(state.last_notice.kind, "auth")
        state.close()

    def test_remote_failure_keeps_form(self):
        self.db.fail("add")
        self.state.update(title="Tea", ingredients="leaves")

        self.assertFalse(self.state.submit())

        self.assertEqual(self.state.title, "Tea")
        self.assertEqual(self.state.last_notice.kind, "remote")


class AuthStateTests(SimpleTestCase):

    def test_sign_in(self):
        backend = FakeAuthBackend()
        session = make_session(None, auth_backend=backend)
        state = AuthState(session)
        state.update(email=" cook@example.org ", password="secret1")

        self.assertTrue(state.sign_in())

        self.assertTrue(state.signed_in)
        self.assertEqual(session.uid, "uid-cook")
        self.assertEqual(backend.calls, [("sign_in", "cook@example.org", "secret1")])

    def test_sign_up(self):
        backend = FakeAuthBackend()
        state = AuthState(make_session(None, auth_backend=backend))
        state.update(email="new@example.org", password="secret1")

        self.assertTrue(state.sign_up())
        self.assertEqual(backend.calls[0][0], "sign_up")

    def test_missing_credentials(self):
        backend = FakeAuthBackend()
        state = AuthState(make_session(None, auth_backend=backend))
        state.update(email="cook@example.org")

        self.assertFalse(state.sign_in())

        self.assertEqual(state.last_notice.message, "Enter email and password")
        self.assertEqual(backend.calls, [])

    def test_rejected_credentials(self):
        backend = FakeAuthBackend(error=NotAuthenticated("Wrong password"))
        state = AuthState(make_session(None, auth_backend=backend))
        state.update(email="cook@example.org", password="nope")

        self.assertFalse(state.sign_in())

        self.assertFalse(state.signed_in)
        self.assertEqual(state.last_notice.message, "Wrong password")

    def test_service_down(self):
        backend = FakeAuthBackend(error=RemoteError())
        state = AuthState(make_session(None, auth_backend=backend))
        state.update(email="cook@example.org", password="secret1")

        self.assertFalse(state.sign_in())
        self.assertEqual(state.last_notice.kind, "remote")
