"""
Warehouse models.
"""
from django.db import models

from apps.core.models import TimeStampedModel


class Warehouse(TimeStampedModel):
    """Warehouse model."""
    title = models.CharField(max_length=255, verbose_name='title')
    is_active = models.BooleanField(default=True, verbose_name='active')

    class Meta:
        db_table = 'warehouses'
        verbose_name = 'warehouse'
        verbose_name_plural = 'warehouses'
        ordering = ['id']

    def __str__(self):
        return self.title

    @property
    def status(self):
        return 'active' if self.is_active else 'passive'
