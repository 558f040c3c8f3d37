"""Explicit session context passed to services and view state holders."""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from recipes import firebase_auth_services
from recipes.exceptions import NotAuthenticated

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Opaque signed-in identity issued by Firebase Auth."""

    uid: str
    email: Optional[str] = None
    id_token: str = ""
    refresh_token: str = ""

    @classmethod
    def from_auth_response(cls, payload) -> "Identity":
        """Build an identity from an Identity Toolkit sign-in/sign-up response."""
        return cls(
            uid=payload["localId"],
            email=payload.get("email") or None,
            id_token=payload.get("idToken", ""),
            refresh_token=payload.get("refreshToken", ""),
        )

    @classmethod
    def from_claims(cls, claims, id_token: str = "") -> "Identity":
        """Build an identity from verified ID token claims."""
        return cls(uid=claims["uid"], email=claims.get("email") or None, id_token=id_token)

    @property
    def is_authenticated(self) -> bool:
        return True


class SessionContext:
    """Holds the current identity and notifies listeners whenever it changes."""

    def __init__(self, identity: Optional[Identity] = None, auth_backend=firebase_auth_services):
        self._identity = identity
        self._auth = auth_backend
        self._listeners: List[Callable[[Optional[Identity]], None]] = []
        self._lock = threading.Lock()

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    @property
    def uid(self) -> Optional[str]:
        return self._identity.uid if self._identity else None

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    def require(self) -> Identity:
        """Return the current identity or raise NotAuthenticated."""
        if self._identity is None:
            raise NotAuthenticated()
        return self._identity

    def sign_in(self, email: str, password: str) -> Identity:
        payload = self._auth.sign_in_with_email_and_password(email, password)
        return self._set(Identity.from_auth_response(payload))

    def sign_up(self, email: str, password: str) -> Identity:
        payload = self._auth.sign_up_with_email_and_password(email, password)
        return self._set(Identity.from_auth_response(payload))

    def sign_out(self) -> None:
        self._set(None)

    def add_listener(self, callback: Callable[[Optional[Identity]], None]) -> Callable[[], None]:
        """Register a session-changed callback; returns a function that removes it."""
        with self._lock:
            self._listeners.append(callback)

        def remove():
            with self._lock:
                if callback in self._listeners:
                    self._listeners.remove(callback)

        return remove

    def _set(self, identity: Optional[Identity]):
        with self._lock:
            changed = identity != self._identity
            self._identity = identity
            listeners = list(self._listeners)
        if changed:
            logger.info("Session changed: %s", identity.uid if identity else "signed out")
            for listener in listeners:
                listener(identity)
        return identity
