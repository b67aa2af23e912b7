"""
Sales views.
"""
from apps.core.views import ResourceViewSet
from .models import Order
from .serializers import (
    OrderCreateSerializer,
    OrderSerializer,
    OrderUpdateSerializer,
)


class OrderViewSet(ResourceViewSet):
    """Order management ViewSet."""
    queryset = Order.objects.select_related('client', 'product', 'warehouse').all()
    serializer_class = OrderSerializer
    serializer_classes = {
        'create': OrderCreateSerializer,
        'update': OrderUpdateSerializer,
    }
    filterset_fields = ['client', 'product', 'warehouse']
    ordering_fields = ['id', 'quantity', 'full_amount', 'created_at']
    resource_label = 'Order'
    id_key = 'order_id'

    def perform_create(self, serializer):
        """The authenticated client places the order."""
        return serializer.save(client=self.request.user)
