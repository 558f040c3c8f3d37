from django import forms


class CommentForm(forms.Form):
    """Form for adding a comment to a recipe."""

    text = forms.CharField(
        max_length=2000,
        widget=forms.Textarea(attrs={'rows': 1, 'placeholder': 'Add a comment...'}),
        error_messages={'required': 'Comment cannot be empty'},
    )
