"""
Inventory services.
"""
import logging

from django.db import IntegrityError, transaction

from apps.core.exceptions import DuplicateStockError
from .models import ProductWarehouse

logger = logging.getLogger(__name__)


class InventoryService:
    """Inventory business logic service."""

    @staticmethod
    def stock_exists(product_id, warehouse_id):
        return ProductWarehouse.objects.filter(
            product_id=product_id,
            warehouse_id=warehouse_id
        ).exists()

    @staticmethod
    def assign_stock(product, warehouse, quantity):
        """
        Create the stock row for a product/warehouse pair.
        A pair can only be assigned once.
        """
        if InventoryService.stock_exists(product.pk, warehouse.pk):
            logger.info(f'Stock for product {product.pk} in warehouse {warehouse.pk} already exists')
            raise DuplicateStockError()

        try:
            with transaction.atomic():
                return ProductWarehouse.objects.create(
                    product=product,
                    warehouse=warehouse,
                    quantity=quantity
                )
        except IntegrityError:
            # Lost a race against a concurrent insert of the same pair.
            raise DuplicateStockError()
