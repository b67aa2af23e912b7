"""
Currency views.
"""
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .services import CurrencyService


class CurrencyView(APIView):
    """Pass-through of the upstream currency list. Open to everyone."""
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        return Response({
            'status': True,
            'data': CurrencyService.fetch_currencies(),
        })
