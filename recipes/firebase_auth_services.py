"""Firebase Auth helper functions for email/password identity flows."""

import logging
import requests
from django.conf import settings
from firebase_admin import auth as firebase_auth
from .exceptions import NotAuthenticated, RemoteError
from .firebase_admin_client import get_app, _should_log

logger = logging.getLogger(__name__)

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1/accounts:{action}?key={api_key}"

# Firebase error codes that mean the credentials were rejected rather than
# the service being unreachable.
CREDENTIAL_ERRORS = {
    "EMAIL_NOT_FOUND": "No account with this email",
    "INVALID_PASSWORD": "Wrong password",
    "INVALID_LOGIN_CREDENTIALS": "Wrong email or password",
    "USER_DISABLED": "This account is disabled",
    "EMAIL_EXISTS": "An account with this email already exists",
    "INVALID_EMAIL": "Email address is malformed",
    "WEAK_PASSWORD": "Password should be at least 6 characters",
}


def _api_key():
    api_key = getattr(settings, "FIREBASE_API_KEY", None)
    if not api_key:
        if _should_log():
            logger.warning("Firebase auth skipped: FIREBASE_API_KEY not configured")
        raise RemoteError("Sign-in is not configured")
    return api_key


def _error_code(response):
    try:
        message = response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return ""
    # Messages look like "WEAK_PASSWORD : Password should be at least 6 characters"
    return str(message).split(" ", 1)[0]


def _post(action: str, email: str, password: str):
    url = IDENTITY_TOOLKIT_URL.format(action=action, api_key=_api_key())
    payload = {
        "email": email,
        "password": password,
        "returnSecureToken": True,
    }
    try:
        response = requests.post(url, json=payload, timeout=settings.FIREBASE_AUTH_TIMEOUT)
    except requests.RequestException as e:
        logger.error("Firebase %s request failed: %s", action, e)
        raise RemoteError(cause=e)

    if response.status_code == 200:
        logger.debug("Firebase %s OK for %s", action, email)
        return response.json()

    code = _error_code(response)
    logger.warning(
        "Firebase %s failed for %s (status=%s, code=%s)",
        action,
        email,
        response.status_code,
        code or getattr(response, "text", ""),
    )
    if code in CREDENTIAL_ERRORS:
        raise NotAuthenticated(CREDENTIAL_ERRORS[code])
    raise RemoteError(f"Authentication failed ({response.status_code})")


def sign_in_with_email_and_password(email: str, password: str):
    """Sign in against the Firebase REST API and return the response JSON."""
    return _post("signInWithPassword", email, password)


def sign_up_with_email_and_password(email: str, password: str):
    """Create an account through the Firebase REST API and return the response JSON."""
    return _post("signUp", email, password)


def verify_id_token(id_token: str):
    """Verify a Firebase ID token with the Admin SDK and return its claims."""
    get_app()  # ensure Firebase app is initialised
    return firebase_auth.verify_id_token(id_token)
