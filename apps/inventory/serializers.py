"""
Inventory serializers.
"""
from rest_framework import serializers

from apps.core.serializers import PartialUpdateSerializer
from apps.products.models import Product
from apps.warehouses.models import Warehouse
from .models import MAX_QUANTITY, ProductWarehouse
from .services import InventoryService


class ProductWarehouseSerializer(serializers.ModelSerializer):
    """ProductWarehouse projection used by list, show and edit."""
    product_title = serializers.CharField(source='product.title', read_only=True)
    warehouse_title = serializers.CharField(source='warehouse.title', read_only=True)

    class Meta:
        model = ProductWarehouse
        fields = ['id', 'product_title', 'warehouse_title', 'quantity']


class ProductWarehouseCreateSerializer(serializers.ModelSerializer):
    """ProductWarehouse create serializer."""
    product_id = serializers.PrimaryKeyRelatedField(
        source='product',
        queryset=Product.objects.all()
    )
    warehouse_id = serializers.PrimaryKeyRelatedField(
        source='warehouse',
        queryset=Warehouse.objects.all()
    )
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)

    class Meta:
        model = ProductWarehouse
        fields = ['product_id', 'warehouse_id', 'quantity']
        # The pair check lives in InventoryService so it can answer with its own message.
        validators = []

    def create(self, validated_data):
        return InventoryService.assign_stock(**validated_data)


class ProductWarehouseUpdateSerializer(PartialUpdateSerializer):
    """ProductWarehouse update serializer; only the quantity can change."""
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)

    class Meta:
        model = ProductWarehouse
        fields = ['quantity']
