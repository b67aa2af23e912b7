"""
Tests for accounts services.
"""
import pytest
from apps.accounts.models import AuthToken
from apps.accounts.services import AuthService
from apps.core.exceptions import InvalidCredentialsError


@pytest.mark.django_db
class TestAuthService:
    """Tests for AuthService."""

    def test_login(self, create_client):
        client = create_client(phone='998912223344')

        logged_in, key = AuthService.login('998912223344', 'user12345')

        assert logged_in == client
        assert AuthToken.objects.get(client=client).token_hash == AuthToken.hash_key(key)

    def test_login_invalid(self, create_client):
        create_client(phone='998912223344')

        with pytest.raises(InvalidCredentialsError):
            AuthService.login('998912223344', 'wrong-pass')

    def test_revoke_tokens(self, create_client):
        client = create_client()
        AuthToken.issue(client)
        AuthToken.issue(client)

        assert AuthService.revoke_tokens(client) == 2
        assert client.tokens.count() == 0
