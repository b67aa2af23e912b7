"""
Pytest configuration and shared fixtures.
"""
import pytest
from decimal import Decimal
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    """Return an API client instance."""
    return APIClient()


@pytest.fixture
def create_client(db):
    """Factory fixture to create clients (API users)."""
    counter = [0]

    def _create_client(full_name='Test Client', phone=None, password='user12345', **kwargs):
        from apps.accounts.models import Client

        counter[0] += 1
        if phone is None:
            phone = f'998900{counter[0]:06d}'
        kwargs.setdefault('gender', 1)

        return Client.objects.create_user(
            phone=phone,
            password=password,
            full_name=full_name,
            **kwargs
        )
    return _create_client


@pytest.fixture
def current_client(create_client):
    """The client the authenticated API client acts as."""
    return create_client(full_name='Current Client', phone='998901234567')


@pytest.fixture
def auth_client(api_client, current_client):
    """Return an API client authenticated with a bearer token."""
    from apps.accounts.models import AuthToken

    _, key = AuthToken.issue(current_client)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {key}')
    return api_client


@pytest.fixture
def create_product(db):
    """Factory fixture to create products."""
    def _create_product(title='Test Product', amount=Decimal('10.00'), **kwargs):
        from apps.products.models import Product
        return Product.objects.create(title=title, amount=amount, **kwargs)
    return _create_product


@pytest.fixture
def product(create_product):
    """Create a default product."""
    return create_product()


@pytest.fixture
def create_warehouse(db):
    """Factory fixture to create warehouses."""
    def _create_warehouse(title='Test Warehouse', is_active=True, **kwargs):
        from apps.warehouses.models import Warehouse
        return Warehouse.objects.create(title=title, is_active=is_active, **kwargs)
    return _create_warehouse


@pytest.fixture
def warehouse(create_warehouse):
    """Create a default warehouse."""
    return create_warehouse()


@pytest.fixture
def create_stock(db, product, warehouse):
    """Factory fixture to create product stock rows."""
    def _create_stock(quantity=10, **kwargs):
        from apps.inventory.models import ProductWarehouse
        return ProductWarehouse.objects.create(
            product=kwargs.pop('product', product),
            warehouse=kwargs.pop('warehouse', warehouse),
            quantity=quantity,
            **kwargs
        )
    return _create_stock


@pytest.fixture
def create_order(db, current_client, product, warehouse):
    """Factory fixture to create orders priced through OrderService."""
    def _create_order(quantity=2, **kwargs):
        from apps.sales.services import OrderService
        return OrderService.create_order(
            client=kwargs.pop('client', current_client),
            product=kwargs.pop('product', product),
            warehouse=kwargs.pop('warehouse', warehouse),
            quantity=quantity
        )
    return _create_order
