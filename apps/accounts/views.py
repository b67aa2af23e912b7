"""
Account views.
"""
import logging

from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from apps.core.mixins import StandardResponseMixin
from apps.core.throttling import LoginThrottle
from apps.core.utils import request_payload
from apps.core.views import ResourceViewSet
from .models import Client
from .serializers import (
    ClientCreateSerializer,
    ClientDetailSerializer,
    ClientListSerializer,
    ClientProfileSerializer,
    ClientUpdateSerializer,
    LoginSerializer,
)
from .services import AuthService

logger = logging.getLogger(__name__)


class ClientViewSet(ResourceViewSet):
    """Client management ViewSet."""
    queryset = Client.objects.all()
    serializer_class = ClientListSerializer
    serializer_classes = {
        'list': ClientListSerializer,
        'retrieve': ClientListSerializer,
        'edit': ClientDetailSerializer,
        'create': ClientCreateSerializer,
        'update': ClientUpdateSerializer,
    }
    filterset_fields = ['gender']
    resource_label = 'Client'
    id_key = 'client_id'
    messages = {
        **ResourceViewSet.messages,
        'created': 'Client created success!',
    }


class LoginView(StandardResponseMixin, APIView):
    """
    Exchange phone and password for a bearer token.
    Phone and password may come in the query string or the body.
    """
    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [LoginThrottle]

    def post(self, request):
        serializer = LoginSerializer(data=request_payload(request))
        serializer.is_valid(raise_exception=True)

        client, token = AuthService.login(
            phone=serializer.validated_data['phone'],
            password=serializer.validated_data['password'],
            request=request
        )

        return self.success_response(
            data={
                'user': ClientProfileSerializer(client).data,
                'token': token,
            },
            message='Login success!'
        )


class LogoutView(StandardResponseMixin, APIView):
    """Revoke every token of the authenticated client."""
    permission_classes = [IsAuthenticated]

    def post(self, request):
        revoked = AuthService.revoke_tokens(request.user)
        logger.info(f'Client {request.user.pk} logged out, {revoked} token(s) revoked')
        return self.success_response(message='Successfully logged out.')
