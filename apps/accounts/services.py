"""
Account services.
"""
import logging

from django.contrib.auth import authenticate
from django.contrib.auth.models import update_last_login

from apps.core.exceptions import InvalidCredentialsError
from apps.core.utils import mask_phone
from .models import AuthToken

logger = logging.getLogger(__name__)


class AuthService:
    """Login/logout business logic."""

    @staticmethod
    def login(phone, password, request=None):
        """
        Verify credentials and start a new session.
        Every token the client held before is revoked.
        Returns ``(client, plaintext_token)``.
        """
        client = authenticate(request, phone=phone, password=password)
        if client is None:
            logger.warning(f'Failed login for phone {mask_phone(phone)}')
            raise InvalidCredentialsError()

        revoked = AuthService.revoke_tokens(client)
        _, key = AuthToken.issue(client)
        update_last_login(None, client)

        logger.info(f'Client {client.pk} logged in, {revoked} previous token(s) revoked')
        return client, key

    @staticmethod
    def revoke_tokens(client):
        """Delete all tokens of ``client``; return how many were removed."""
        deleted, _ = AuthToken.objects.filter(client=client).delete()
        return deleted
