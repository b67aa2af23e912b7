"""
Inventory models: ProductWarehouse.
"""
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.models import TimeStampedModel

MAX_QUANTITY = 99999999999


class ProductWarehouse(TimeStampedModel):
    """Stock of one product in one warehouse."""
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.CASCADE,
        related_name='stock_items',
        verbose_name='product'
    )
    warehouse = models.ForeignKey(
        'warehouses.Warehouse',
        on_delete=models.CASCADE,
        related_name='stock_items',
        verbose_name='warehouse'
    )
    quantity = models.PositiveBigIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(MAX_QUANTITY)],
        verbose_name='quantity'
    )

    class Meta:
        db_table = 'product_warehouses'
        verbose_name = 'product warehouse'
        verbose_name_plural = 'product warehouses'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['product', 'warehouse'],
                name='unique_product_warehouse'
            ),
        ]

    def __str__(self):
        return f'{self.product.title} @ {self.warehouse.title}: {self.quantity}'
