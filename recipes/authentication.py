from rest_framework import authentication
from rest_framework import exceptions

from .firebase_auth_services import verify_id_token
from .session import Identity


class FirebaseAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend validating Firebase ID tokens."""

    keyword = "Bearer"

    def authenticate(self, request):
        """Validate Authorization header token and return (identity, token)."""
        auth_header = request.META.get('HTTP_AUTHORIZATION')
        if not auth_header:
            return None

        id_token = auth_header.split(' ').pop()

        try:
            decoded_token = verify_id_token(id_token)
        except Exception:
            raise exceptions.AuthenticationFailed('Invalid Firebase token')

        if not decoded_token.get("uid"):
            raise exceptions.AuthenticationFailed('Token has no uid')
        return (Identity.from_claims(decoded_token, id_token=id_token), id_token)

    def authenticate_header(self, request):
        return self.keyword
