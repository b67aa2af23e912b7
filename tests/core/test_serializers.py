"""
Tests for core serializer fields.
"""
import pytest
from decimal import Decimal
from rest_framework import serializers

from apps.core.serializers import RoundedDecimalField


class TestRoundedDecimalField:
    """Tests for RoundedDecimalField."""

    def test_rounds_half_up(self):
        field = RoundedDecimalField(max_digits=15, decimal_places=2)

        assert field.to_internal_value('12.345') == Decimal('12.35')
        assert field.to_internal_value('12.344') == Decimal('12.34')

    def test_keeps_exact_values(self):
        field = RoundedDecimalField(max_digits=15, decimal_places=2)

        assert field.to_internal_value('7') == Decimal('7.00')

    def test_too_many_digits(self):
        field = RoundedDecimalField(max_digits=5, decimal_places=2)

        with pytest.raises(serializers.ValidationError):
            field.to_internal_value('123456.789')
