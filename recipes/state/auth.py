"""Sign-in / sign-up screen."""

from recipes.exceptions import ValidationFailed
from recipes.forms import CredentialsForm, first_error
from recipes.state.base import ScreenState


class AuthState(ScreenState):
    """Email and password fields driving the session's sign-in and sign-up."""

    def __init__(self, session, db=None, queries=None):
        super().__init__(session, db, queries)
        self.email = ""
        self.password = ""

    @property
    def signed_in(self):
        return self.session.is_authenticated

    def update(self, email=None, password=None):
        if email is not None:
            self.email = email
        if password is not None:
            self.password = password
        self.changed()

    def _credentials(self):
        form = CredentialsForm({"email": self.email.strip(), "password": self.password})
        if not form.is_valid():
            raise ValidationFailed(first_error(form))
        return form.cleaned_data["email"], form.cleaned_data["password"]

    def _authenticate(self, method):
        def run():
            email, password = self._credentials()
            return method(email, password)
        ok, _ = self.attempt(run)
        return ok

    def sign_in(self):
        return self._authenticate(self.session.sign_in)

    def sign_up(self):
        return self._authenticate(self.session.sign_up)
