from django.test import SimpleTestCase

from recipes.forms import CommentForm, CredentialsForm, RecipeSubmissionForm, first_error


class RecipeSubmissionFormTests(SimpleTestCase):

    def test_valid_form_builds_pending_recipe(self):
        form = RecipeSubmissionForm({"title": " Tea ", "ingredients": "leaves", "instructions": ""})
        self.assertTrue(form.is_valid())

        recipe = form.to_recipe(author_id="alice", timestamp=9)

        self.assertEqual(recipe.title, "Tea")
        self.assertEqual(recipe.author_id, "alice")
        self.assertEqual(recipe.to_document()["status"], "pending")

    def test_title_and_ingredients_required(self):
        form = RecipeSubmissionForm({"title": "", "ingredients": "  "})
        self.assertFalse(form.is_valid())
        self.assertIn("title", form.errors)
        self.assertIn("ingredients", form.errors)
        self.assertEqual(first_error(form), "Fill in the required fields")


class CommentFormTests(SimpleTestCase):

    def test_blank_comment(self):
        form = CommentForm({"text": "   "})
        self.assertFalse(form.is_valid())
        self.assertEqual(first_error(form), "Comment cannot be empty")

    def test_too_long(self):
        self.assertFalse(CommentForm({"text": "x" * 2001}).is_valid())


class CredentialsFormTests(SimpleTestCase):

    def test_requires_both_fields(self):
        form = CredentialsForm({"email": "", "password": ""})
        self.assertFalse(form.is_valid())
        self.assertEqual(first_error(form), "Enter email and password")

    def test_password_is_not_stripped(self):
        form = CredentialsForm({"email": "cook@example.org", "password": " secret "})
        self.assertTrue(form.is_valid())
        self.assertEqual(form.cleaned_data["password"], " secret ")

    def test_malformed_email(self):
        self.assertFalse(CredentialsForm({"email": "cook", "password": "secret1"}).is_valid())
