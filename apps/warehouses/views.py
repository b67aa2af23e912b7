"""
Warehouse views.
"""
from apps.core.views import ResourceViewSet
from .models import Warehouse
from .serializers import (
    WarehouseCreateSerializer,
    WarehouseDetailSerializer,
    WarehouseListSerializer,
    WarehouseUpdateSerializer,
)


class WarehouseViewSet(ResourceViewSet):
    """Warehouse management ViewSet."""
    queryset = Warehouse.objects.all()
    serializer_class = WarehouseDetailSerializer
    serializer_classes = {
        'list': WarehouseListSerializer,
        'create': WarehouseCreateSerializer,
        'update': WarehouseUpdateSerializer,
    }
    filterset_fields = ['is_active']
    ordering_fields = ['id', 'title', 'created_at']
    resource_label = 'Warehouse'
    id_key = 'warehouse_id'
