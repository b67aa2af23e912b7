"""
Product models.
"""
from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import TimeStampedModel


class Product(TimeStampedModel):
    """Product model."""
    title = models.CharField(max_length=255, verbose_name='title')
    amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        validators=[MinValueValidator(0)],
        verbose_name='price'
    )

    class Meta:
        db_table = 'products'
        verbose_name = 'product'
        verbose_name_plural = 'products'
        ordering = ['id']

    def __str__(self):
        return self.title
