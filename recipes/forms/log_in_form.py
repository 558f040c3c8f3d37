from django import forms

INCOMPLETE_CREDENTIALS = "Enter email and password"


class CredentialsForm(forms.Form):
    """Email/password pair used for both sign-in and sign-up."""

    email = forms.EmailField(label="Email", error_messages={"required": INCOMPLETE_CREDENTIALS})
    password = forms.CharField(
        label="Password",
        strip=False,
        widget=forms.PasswordInput(),
        error_messages={"required": INCOMPLETE_CREDENTIALS},
    )
