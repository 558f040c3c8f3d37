"""Error taxonomy surfaced by services and converted to notices by view state."""


class CookifyError(Exception):
    """Base class for errors the app reports to the user."""

    default_message = "Something went wrong"
    kind = "error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationFailed(CookifyError):
    """A required field is empty or malformed."""

    default_message = "Fill in the required fields"
    kind = "validation"

    def __init__(self, message=None, errors=None):
        super().__init__(message)
        self.errors = errors or {}


class NotAuthenticated(CookifyError):
    """The action needs a signed-in user."""

    default_message = "You need to be signed in"
    kind = "auth"


class PermissionDenied(CookifyError):
    """The signed-in user does not own the record."""

    default_message = "You can only change your own content"
    kind = "permission"


class RemoteError(CookifyError):
    """A Firestore, Firebase Auth or HTTP call failed."""

    default_message = "Could not reach the server"
    kind = "remote"

    def __init__(self, message=None, cause=None):
        super().__init__(message)
        self.cause = cause


class InvalidTransition(CookifyError):
    """A moderation transition was requested from the wrong state."""

    default_message = "Recipe is not awaiting moderation"
    kind = "validation"


class InvalidDeepLink(CookifyError):
    """A deep link URL carries no recipe identifier."""

    default_message = "Link does not point to a recipe"
    kind = "validation"
