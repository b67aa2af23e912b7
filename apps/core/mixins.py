"""
Mixins for views and serializers.
"""
from rest_framework import status
from rest_framework.response import Response


class StandardResponseMixin:
    """Mixin for standard API responses."""

    def success_response(self, data=None, message='Success!', status_code=status.HTTP_200_OK):
        """Return a success response."""
        return Response({
            'status': True,
            'message': message,
            'data': data,
        }, status=status_code)


class MultiSerializerMixin:
    """
    Mixin that allows different serializers for different actions.
    Usage:
        serializer_classes = {
            'list': ListSerializer,
            'retrieve': DetailSerializer,
            'create': CreateSerializer,
        }
    """
    serializer_classes = {}

    def get_serializer_class(self):
        """Return serializer class based on action."""
        return self.serializer_classes.get(
            self.action,
            super().get_serializer_class()
        )
