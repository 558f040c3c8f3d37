"""Firebase Admin client helpers with test-safe behaviors."""

import logging
import os
import sys
import firebase_admin
from firebase_admin import credentials, firestore

from recipes.exceptions import RemoteError

logger = logging.getLogger(__name__)

def _env_truthy(name: str, default: str = "false") -> bool:
    """Return True when env var is set to a truthy value."""
    return os.getenv(name, default).lower() in ("1", "true", "yes")

def _should_log() -> bool:
    """Silence noisy Firebase logs during tests unless explicitly enabled."""
    return not _is_running_tests() or _env_truthy("FIREBASE_VERBOSE_TEST_LOGS")

def _is_running_tests():
    """
    Return True when the test suite is executing.
    This prevents Firebase from attempting network calls during tests.
    """
    return any(arg in sys.argv for arg in ["test", "pytest"]) or "pytest" in sys.modules

def _should_skip_app_init() -> bool:
    """Test runs never reach Firebase unless FIREBASE_ALLOW_TEST_APP is set."""
    return _is_running_tests() and not _env_truthy("FIREBASE_ALLOW_TEST_APP")

def _load_credential():
    cred_path = os.getenv("FIREBASE_SERVICE_ACCOUNT_FILE")
    if not cred_path or not os.path.exists(cred_path):
        if _should_log():
            logger.warning("FIREBASE_SERVICE_ACCOUNT_FILE not found. Firebase features disabled.")
        return None
    return credentials.Certificate(cred_path)

def _init_app(cred):
    try:
        return firebase_admin.initialize_app(cred)
    except Exception as e:
        _log_init_failure(e)
        return None


def _log_init_failure(error):
    if not _should_log():
        return
    logger.error("Failed to initialize Firebase: %s", error)

_app = None

def get_app():
    """
    Lazily initialise the Firebase Admin app.
    Returns None if credentials are missing or invalid, preventing crashes.
    """
    global _app
    if _app:
        return _app
    if firebase_admin._apps:
        _app = firebase_admin.get_app()
        return _app
    if _should_skip_app_init():
        return None

    cred = _load_credential()
    if not cred:
        return None

    _app = _init_app(cred)
    return _app

def get_firestore_client():
    """Helper to get Firestore client safely."""
    # Allow opting out entirely (useful for local dev without Firestore).
    firebase_enabled = _env_truthy("FIREBASE_ENABLE_FIRESTORE", "true")
    if not firebase_enabled:
        return None
    # Skip Firestore entirely during test runs to avoid network calls.
    if _is_running_tests():
        return None
    app = get_app()
    if not app:
        return None
    return firestore.client()

def require_firestore_client():
    """Return the Firestore client or raise RemoteError when it is unavailable."""
    db = get_firestore_client()
    if db is None:
        raise RemoteError("Recipe service is unavailable")
    return db
