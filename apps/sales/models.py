"""
Sales models: Order.
"""
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from apps.core.models import TimeStampedModel
from apps.inventory.models import MAX_QUANTITY


class Order(TimeStampedModel):
    """
    Order model.
    ``full_amount`` is frozen at write time and does not follow later
    product price changes.
    """
    client = models.ForeignKey(
        'accounts.Client',
        on_delete=models.CASCADE,
        related_name='orders',
        verbose_name='client'
    )
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.CASCADE,
        related_name='orders',
        verbose_name='product'
    )
    warehouse = models.ForeignKey(
        'warehouses.Warehouse',
        on_delete=models.CASCADE,
        related_name='orders',
        verbose_name='warehouse'
    )
    quantity = models.PositiveBigIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(MAX_QUANTITY)],
        verbose_name='quantity'
    )
    full_amount = models.DecimalField(
        max_digits=28,
        decimal_places=2,
        verbose_name='full amount'
    )

    class Meta:
        db_table = 'orders'
        verbose_name = 'order'
        verbose_name_plural = 'orders'
        ordering = ['id']

    def __str__(self):
        return f'Order {self.pk}: {self.quantity} x {self.product_id}'
