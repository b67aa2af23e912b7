"""
Sales serializers.
"""
from rest_framework import serializers

from apps.core.serializers import PartialUpdateSerializer
from apps.inventory.models import MAX_QUANTITY
from apps.products.models import Product
from apps.warehouses.models import Warehouse
from .models import Order
from .services import OrderService


class OrderSerializer(serializers.ModelSerializer):
    """Order projection used by list, show and edit."""
    user_id = serializers.IntegerField(source='client_id', read_only=True)
    user_name = serializers.CharField(source='client.full_name', read_only=True)
    product_title = serializers.CharField(source='product.title', read_only=True)
    warehouse_title = serializers.CharField(source='warehouse.title', read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'user_id', 'user_name',
            'product_title', 'warehouse_title',
            'quantity', 'full_amount'
        ]


class OrderCreateSerializer(serializers.ModelSerializer):
    """
    Order create serializer.
    The ordering client is supplied by the view through ``save(client=...)``.
    """
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
        model = Order
        fields = ['product_id', 'warehouse_id', 'quantity']

    def create(self, validated_data):
        return OrderService.create_order(**validated_data)


class OrderUpdateSerializer(PartialUpdateSerializer):
    """Order update serializer; only the quantity can change."""
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_QUANTITY)

    class Meta:
        model = Order
        fields = ['quantity']

    def update(self, instance, validated_data):
        return OrderService.change_quantity(instance, validated_data['quantity'])
