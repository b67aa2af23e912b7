"""
Tests for core permission classes.
"""
import pytest
from unittest.mock import Mock
from apps.core.permissions import IsAuthenticatedAndActive


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    return Mock()


class TestIsAuthenticatedAndActive:
    """Tests for IsAuthenticatedAndActive permission."""

    def test_authenticated_active_client(self, mock_request):
        """An authenticated, active client is allowed."""
        mock_request.user = Mock(is_authenticated=True, is_active=True)

        assert IsAuthenticatedAndActive().has_permission(mock_request, Mock()) is True

    def test_inactive_client(self, mock_request):
        """An authenticated but inactive client is denied."""
        mock_request.user = Mock(is_authenticated=True, is_active=False)

        assert IsAuthenticatedAndActive().has_permission(mock_request, Mock()) is False

    def test_anonymous(self, mock_request):
        """An anonymous request is denied."""
        mock_request.user = Mock(is_authenticated=False, is_active=True)

        assert IsAuthenticatedAndActive().has_permission(mock_request, Mock()) is False

    def test_no_user(self, mock_request):
        mock_request.user = None

        assert IsAuthenticatedAndActive().has_permission(mock_request, Mock()) is False
