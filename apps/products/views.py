"""
Product views.
"""
from apps.core.views import ResourceViewSet
from .models import Product
from .serializers import (
    ProductCreateSerializer,
    ProductDetailSerializer,
    ProductListSerializer,
    ProductUpdateSerializer,
)


class ProductViewSet(ResourceViewSet):
    """Product management ViewSet."""
    queryset = Product.objects.all()
    serializer_class = ProductDetailSerializer
    serializer_classes = {
        'list': ProductListSerializer,
        'create': ProductCreateSerializer,
        'update': ProductUpdateSerializer,
    }
    ordering_fields = ['id', 'title', 'amount', 'created_at']
    resource_label = 'Product'
    id_key = 'product_id'
