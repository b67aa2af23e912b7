"""
Core serializers for the application.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.conf import settings
from django.core.validators import RegexValidator
from rest_framework import serializers

from .utils import normalize_phone


class PhoneField(serializers.CharField):
    """
    Phone number field.
    Formatting characters are stripped before validation, so the stored value
    is digits only.
    """
    default_error_messages = {
        'format': 'The phone format is invalid.',
    }

    def __init__(self, pattern=None, **kwargs):
        kwargs.setdefault('max_length', 20)
        super().__init__(**kwargs)
        self.validators.append(RegexValidator(
            pattern or settings.CLIENT_PHONE_REGEX,
            message=self.error_messages['format']
        ))

    def to_internal_value(self, data):
        return super().to_internal_value(normalize_phone(data))


class RoundedDecimalField(serializers.DecimalField):
    """
    Decimal field that rounds extra decimal places half up instead of
    rejecting them: "12.345" -> 12.35.
    """

    def validate_precision(self, value):
        if self.decimal_places is not None:
            try:
                value = value.quantize(
                    Decimal(1).scaleb(-self.decimal_places),
                    rounding=ROUND_HALF_UP
                )
            except InvalidOperation:
                pass
        return super().validate_precision(value)


class PartialUpdateSerializer(serializers.ModelSerializer):
    """
    Update serializer that writes only the columns whose value changes.

    Callers validate with ``partial=True`` so absent fields are left alone,
    then check ``has_changes()`` before saving.
    """

    def get_changes(self):
        changes = {}
        for field, value in self.validated_data.items():
            if getattr(self.instance, field) != value:
                changes[field] = value
        return changes

    def has_changes(self):
        return bool(self.get_changes())

    def update(self, instance, validated_data):
        changes = self.get_changes()
        for attr, value in changes.items():
            setattr(instance, attr, value)
        instance.save(update_fields=[*changes, 'updated_at'])
        return instance
