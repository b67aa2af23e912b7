"""
Bearer token authentication.
"""
from django.utils import timezone
from rest_framework import exceptions
from rest_framework.authentication import TokenAuthentication

from .models import AuthToken


class BearerTokenAuthentication(TokenAuthentication):
    """
    Authenticate ``Authorization: Bearer <token>`` against AuthToken digests.
    """
    keyword = 'Bearer'
    model = AuthToken

    def authenticate_credentials(self, key):
        token = (
            AuthToken.objects
            .select_related('client')
            .filter(token_hash=AuthToken.hash_key(key))
            .first()
        )
        if token is None:
            raise exceptions.AuthenticationFailed('Invalid token.')

        if not token.client.is_active:
            raise exceptions.AuthenticationFailed('User inactive or deleted.')

        AuthToken.objects.filter(pk=token.pk).update(last_used_at=timezone.now())
        return (token.client, token)
