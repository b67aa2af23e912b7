"""
Tests for inventory services.
"""
import pytest
from unittest.mock import patch
from django.db import IntegrityError

from apps.core.exceptions import DuplicateStockError
from apps.inventory.models import ProductWarehouse
from apps.inventory.services import InventoryService


@pytest.mark.django_db
class TestInventoryService:
    """Tests for InventoryService."""

    def test_assign_stock(self, product, warehouse):
        stock = InventoryService.assign_stock(product, warehouse, 25)

        assert stock.quantity == 25
        assert InventoryService.stock_exists(product.id, warehouse.id)

    def test_assign_stock_twice(self, product, warehouse, create_stock):
        create_stock(quantity=5)

        with pytest.raises(DuplicateStockError) as exc_info:
            InventoryService.assign_stock(product, warehouse, 10)

        assert exc_info.value.message == 'Product Warehouse already exists!'
        assert exc_info.value.status_code == 422
        assert ProductWarehouse.objects.get().quantity == 5

    def test_assign_stock_race(self, product, warehouse):
        with patch.object(InventoryService, 'stock_exists', return_value=False), \
                patch.object(ProductWarehouse.objects, 'create', side_effect=IntegrityError):
            with pytest.raises(DuplicateStockError):
                InventoryService.assign_stock(product, warehouse, 10)

    def test_same_product_other_warehouse(self, product, warehouse, create_warehouse, create_stock):
        create_stock()
        other = create_warehouse(title='Other')

        stock = InventoryService.assign_stock(product, other, 3)

        assert stock.warehouse == other
        assert ProductWarehouse.objects.count() == 2
