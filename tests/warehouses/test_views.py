"""
Tests for warehouses views.
"""
import pytest
from rest_framework import status

from apps.warehouses.models import Warehouse


@pytest.mark.django_db
class TestWarehouseModel:
    """Tests for Warehouse model."""

    def test_status(self, create_warehouse):
        assert create_warehouse(is_active=True).status == 'active'
        assert create_warehouse(is_active=False).status == 'passive'


@pytest.mark.django_db
class TestWarehouseViewSet:
    """Tests for WarehouseViewSet."""

    def test_list_warehouses(self, auth_client, create_warehouse):
        create_warehouse(title='Main', is_active=True)
        create_warehouse(title='Old', is_active=False)

        response = auth_client.get('/api/v1/warehouses/')

        rows = response.data['data']['data']
        assert [(row['title'], row['status']) for row in rows] == [
            ('Main', 'active'),
            ('Old', 'passive'),
        ]
        assert 'is_active' not in rows[0]

    def test_filter_active(self, auth_client, create_warehouse):
        create_warehouse(title='Main', is_active=True)
        create_warehouse(title='Old', is_active=False)

        response = auth_client.get('/api/v1/warehouses/?is_active=false')

        rows = response.data['data']['data']
        assert [row['title'] for row in rows] == ['Old']

    def test_create_warehouse(self, auth_client):
        response = auth_client.post(
            '/api/v1/warehouses/',
            {'title': 'North', 'is_active': False},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Warehouse added success!'
        warehouse = Warehouse.objects.get(pk=response.data['data']['warehouse_id'])
        assert warehouse.is_active is False

    def test_create_warehouse_requires_flag(self, auth_client):
        response = auth_client.post('/api/v1/warehouses/', {'title': 'North'}, format='json')

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert 'is_active' in response.data['errors']

    def test_show_warehouse(self, auth_client, warehouse):
        response = auth_client.get(f'/api/v1/warehouses/{warehouse.id}/')

        data = response.data['data']
        assert data['is_active'] is True
        assert 'status' not in data

    def test_deactivate_warehouse(self, auth_client, warehouse):
        response = auth_client.put(
            f'/api/v1/warehouses/{warehouse.id}/',
            {'is_active': False},
            format='json'
        )

        assert response.data['message'] == 'Warehouse info updated success!'
        assert response.data['data'] == {'warehouse_id': warehouse.id}
        warehouse.refresh_from_db()
        assert warehouse.is_active is False

    def test_delete_warehouse(self, auth_client, warehouse):
        response = auth_client.delete(f'/api/v1/warehouses/{warehouse.id}/')

        assert response.data['message'] == 'Warehouse deleted success!'
        assert not Warehouse.objects.exists()
