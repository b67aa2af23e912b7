"""
Account models: Client, AuthToken.
"""
import hashlib
import secrets

from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.db import models

from apps.core.models import TimeStampedModel


class ClientManager(BaseUserManager):
    """Client manager; phone is the login identifier."""

    def create_user(self, phone, password=None, **extra_fields):
        """Create and save a client with a hashed password."""
        if not phone:
            raise ValueError('Client must have a phone number')

        client = self.model(phone=phone, **extra_fields)
        client.set_password(password)
        client.save(using=self._db)
        return client


class Client(AbstractBaseUser, TimeStampedModel):
    """Client model. Clients are also the API's users."""
    GENDER_CHOICES = [
        (0, 'female'),
        (1, 'male'),
    ]

    full_name = models.CharField(max_length=32, verbose_name='full name')
    birth_date = models.DateField(null=True, blank=True, verbose_name='birth date')
    gender = models.PositiveSmallIntegerField(
        choices=GENDER_CHOICES,
        verbose_name='gender'
    )
    phone = models.CharField(
        max_length=20,
        unique=True,
        verbose_name='phone'
    )
    email = models.EmailField(
        null=True,
        blank=True,
        verbose_name='email'
    )

    objects = ClientManager()

    USERNAME_FIELD = 'phone'
    REQUIRED_FIELDS = ['full_name', 'gender']

    class Meta:
        db_table = 'users'
        verbose_name = 'client'
        verbose_name_plural = 'clients'
        ordering = ['id']

    def __str__(self):
        return f'{self.full_name} ({self.phone})'


class AuthToken(models.Model):
    """
    Opaque bearer token.
    Only the sha256 digest is stored; the plaintext is handed out once.
    """
    client = models.ForeignKey(
        Client,
        on_delete=models.CASCADE,
        related_name='tokens',
        verbose_name='client'
    )
    name = models.CharField(max_length=100, default='authToken', verbose_name='name')
    token_hash = models.CharField(max_length=64, unique=True, verbose_name='token hash')
    last_used_at = models.DateTimeField(null=True, blank=True, verbose_name='last used at')
    created_at = models.DateTimeField(auto_now_add=True, verbose_name='created at')

    class Meta:
        db_table = 'auth_tokens'
        verbose_name = 'auth token'
        verbose_name_plural = 'auth tokens'

    def __str__(self):
        return f'{self.name} for client {self.client_id}'

    @staticmethod
    def hash_key(key):
        return hashlib.sha256(key.encode()).hexdigest()

    @classmethod
    def issue(cls, client, name='authToken'):
        """Create a token for ``client`` and return ``(token, plaintext)``."""
        key = secrets.token_hex(20)
        token = cls.objects.create(client=client, name=name, token_hash=cls.hash_key(key))
        return token, key
