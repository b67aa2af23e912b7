"""
Product serializers.
"""
from decimal import Decimal

from rest_framework import serializers

from apps.core.serializers import PartialUpdateSerializer, RoundedDecimalField
from .models import Product


class ProductListSerializer(serializers.ModelSerializer):
    """Product list serializer."""

    class Meta:
        model = Product
        fields = ['id', 'title', 'amount']


class ProductDetailSerializer(serializers.ModelSerializer):
    """Product detail serializer."""

    class Meta:
        model = Product
        fields = ['id', 'title', 'amount', 'created_at', 'updated_at']


class ProductCreateSerializer(serializers.ModelSerializer):
    """Product create serializer."""
    amount = RoundedDecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0')
    )

    class Meta:
        model = Product
        fields = ['title', 'amount']


class ProductUpdateSerializer(PartialUpdateSerializer):
    """Product update serializer."""
    amount = RoundedDecimalField(
        max_digits=15,
        decimal_places=2,
        min_value=Decimal('0')
    )

    class Meta:
        model = Product
        fields = ['title', 'amount']
