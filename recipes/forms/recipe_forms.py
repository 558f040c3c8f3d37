from django import forms

from recipes.models import Recipe


class RecipeSubmissionForm(forms.Form):
    """Form for submitting a new recipe for moderation."""

    field_order = ["title", "ingredients", "instructions"]

    title = forms.CharField(
        label="Recipe title",
        max_length=200,
        error_messages={"required": "Fill in the required fields"},
    )
    ingredients = forms.CharField(
        label="Ingredients",
        widget=forms.Textarea(attrs={"rows": 5}),
        error_messages={"required": "Fill in the required fields"},
    )
    instructions = forms.CharField(
        label="Instructions",
        required=False,
        widget=forms.Textarea(attrs={"rows": 6}),
    )

    def to_recipe(self, author_id, timestamp):
        """Build a pending Recipe from the validated data."""
        cleaned = self.cleaned_data
        return Recipe(
            title=cleaned["title"],
            ingredients=cleaned["ingredients"],
            instructions=cleaned.get("instructions") or "",
            author_id=author_id,
            timestamp=timestamp,
        )
