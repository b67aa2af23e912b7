"""
Inventory views.
"""
from apps.core.views import ResourceViewSet
from .models import ProductWarehouse
from .serializers import (
    ProductWarehouseCreateSerializer,
    ProductWarehouseSerializer,
    ProductWarehouseUpdateSerializer,
)


class ProductWarehouseViewSet(ResourceViewSet):
    """Product stock per warehouse ViewSet."""
    queryset = ProductWarehouse.objects.select_related('product', 'warehouse').all()
    serializer_class = ProductWarehouseSerializer
    serializer_classes = {
        'create': ProductWarehouseCreateSerializer,
        'update': ProductWarehouseUpdateSerializer,
    }
    filterset_fields = ['product', 'warehouse']
    ordering_fields = ['id', 'quantity', 'created_at']
    resource_label = 'Product Warehouse'
    id_key = 'product_warehouse_id'
