"""
Warehouse serializers.
"""
from rest_framework import serializers

from apps.core.serializers import PartialUpdateSerializer
from .models import Warehouse


class WarehouseListSerializer(serializers.ModelSerializer):
    """Warehouse list serializer."""
    status = serializers.CharField(read_only=True)

    class Meta:
        model = Warehouse
        fields = ['id', 'title', 'status']


class WarehouseDetailSerializer(serializers.ModelSerializer):
    """Warehouse detail serializer."""

    class Meta:
        model = Warehouse
        fields = ['id', 'title', 'is_active', 'created_at', 'updated_at']


class WarehouseCreateSerializer(serializers.ModelSerializer):
    """Warehouse create serializer."""
    is_active = serializers.BooleanField()

    class Meta:
        model = Warehouse
        fields = ['title', 'is_active']


class WarehouseUpdateSerializer(PartialUpdateSerializer):
    """Warehouse update serializer."""

    class Meta:
        model = Warehouse
        fields = ['title', 'is_active']
