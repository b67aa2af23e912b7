"""
Core abstract models for the application.
"""
from django.db import models


class TimeStampedModel(models.Model):
    """Abstract base model with created and updated timestamps."""
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='updated at'
    )

    class Meta:
        abstract = True
