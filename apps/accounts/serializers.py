"""
Account serializers.
"""
from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from apps.core.serializers import PartialUpdateSerializer, PhoneField
from .models import Client

PHONE_TAKEN_MESSAGE = 'The phone has already been taken.'


class ClientListSerializer(serializers.ModelSerializer):
    """Client projection used by list and show."""

    class Meta:
        model = Client
        fields = ['id', 'full_name', 'birth_date', 'gender', 'phone', 'email']


class ClientDetailSerializer(serializers.ModelSerializer):
    """Client projection used by edit; never exposes the password hash."""

    class Meta:
        model = Client
        fields = [
            'id', 'full_name', 'birth_date', 'gender', 'phone', 'email',
            'last_login', 'created_at', 'updated_at'
        ]


class ClientCreateSerializer(serializers.ModelSerializer):
    """Client create serializer."""
    birth_date = serializers.DateField(
        required=False,
        allow_null=True,
        input_formats=['%Y-%m-%d']
    )
    gender = serializers.ChoiceField(choices=Client.GENDER_CHOICES)
    phone = PhoneField(
        validators=[UniqueValidator(
            queryset=Client.objects.all(),
            message=PHONE_TAKEN_MESSAGE
        )]
    )
    email = serializers.EmailField(required=False, allow_null=True)
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        max_length=32
    )

    class Meta:
        model = Client
        fields = ['full_name', 'birth_date', 'gender', 'phone', 'email', 'password']

    def create(self, validated_data):
        return Client.objects.create_user(**validated_data)


class ClientUpdateSerializer(PartialUpdateSerializer):
    """Client update serializer; every field is optional."""
    birth_date = serializers.DateField(input_formats=['%Y-%m-%d'])
    gender = serializers.ChoiceField(choices=Client.GENDER_CHOICES)
    phone = PhoneField(
        validators=[UniqueValidator(
            queryset=Client.objects.all(),
            message=PHONE_TAKEN_MESSAGE
        )]
    )
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        max_length=32
    )

    class Meta:
        model = Client
        fields = ['full_name', 'birth_date', 'gender', 'phone', 'email', 'password']

    def get_changes(self):
        changes = super().get_changes()
        # The stored value is a hash, so compare through the hasher instead.
        password = changes.pop('password', None)
        if password is not None and not self.instance.check_password(password):
            changes['password'] = password
        return changes

    def update(self, instance, validated_data):
        changes = self.get_changes()
        password = changes.pop('password', None)
        for attr, value in changes.items():
            setattr(instance, attr, value)
        update_fields = [*changes, 'updated_at']
        if password is not None:
            instance.set_password(password)
            update_fields.append('password')
        instance.save(update_fields=update_fields)
        return instance


class ClientProfileSerializer(serializers.ModelSerializer):
    """Client as returned by login: no hash, no internal timestamps."""

    class Meta:
        model = Client
        fields = ['id', 'full_name', 'birth_date', 'gender', 'phone', 'email', 'last_login']


class LoginSerializer(serializers.Serializer):
    """Login serializer."""
    phone = PhoneField(pattern=r'^\d+$')
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        max_length=20
    )
