"""
Tests for sales views.
"""
import pytest
from decimal import Decimal
from rest_framework import status

from apps.sales.models import Order


@pytest.mark.django_db
class TestOrderViewSet:
    """Tests for OrderViewSet."""

    def test_list_orders(self, auth_client, current_client, create_order):
        order = create_order(quantity=3)

        response = auth_client.get('/api/v1/orders/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['data']['data'] == [{
            'id': order.id,
            'user_id': current_client.id,
            'user_name': 'Current Client',
            'product_title': 'Test Product',
            'warehouse_title': 'Test Warehouse',
            'quantity': 3,
            'full_amount': '30.00',
        }]

    def test_filter_by_client(self, auth_client, create_client, create_order):
        create_order()
        other = create_client(full_name='Other')
        create_order(client=other)

        response = auth_client.get(f'/api/v1/orders/?client={other.id}')

        rows = response.data['data']['data']
        assert [row['user_name'] for row in rows] == ['Other']

    def test_create_order(self, auth_client, current_client, create_product, warehouse):
        product = create_product(amount=Decimal('7.25'))

        response = auth_client.post(
            '/api/v1/orders/',
            {'product_id': product.id, 'warehouse_id': warehouse.id, 'quantity': 4},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Order added success!'
        order = Order.objects.get(pk=response.data['data']['order_id'])
        assert order.client == current_client
        assert order.full_amount == Decimal('29.00')

    def test_create_order_ignores_client_in_payload(self, auth_client, current_client, create_client,
                                                    product, warehouse):
        other = create_client()

        response = auth_client.post(
            '/api/v1/orders/',
            {
                'product_id': product.id,
                'warehouse_id': warehouse.id,
                'quantity': 1,
                'client': other.id,
                'full_amount': '1.00',
            },
            format='json'
        )

        order = Order.objects.get(pk=response.data['data']['order_id'])
        assert order.client == current_client
        assert order.full_amount == Decimal('10.00')

    def test_create_order_invalid(self, auth_client, product):
        response = auth_client.post(
            '/api/v1/orders/',
            {'product_id': product.id, 'quantity': 'many'},
            format='json'
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert set(response.data['errors']) == {'warehouse_id', 'quantity'}

    def test_show_order(self, auth_client, create_order):
        order = create_order()

        response = auth_client.get(f'/api/v1/orders/{order.id}/')

        assert response.data['data']['full_amount'] == '20.00'

    def test_update_reprices_from_current_amount(self, auth_client, create_order, product):
        order = create_order(quantity=2)
        product.amount = Decimal('3.00')
        product.save()

        response = auth_client.put(
            f'/api/v1/orders/{order.id}/',
            {'quantity': 5},
            format='json'
        )

        assert response.data['message'] == 'Order info updated success!'
        assert response.data['data'] == {'order_id': order.id}
        order.refresh_from_db()
        assert order.quantity == 5
        assert order.full_amount == Decimal('15.00')

    def test_update_same_quantity(self, auth_client, create_order):
        order = create_order(quantity=2)
        updated_at = order.updated_at

        response = auth_client.put(
            f'/api/v1/orders/{order.id}/',
            {'quantity': 2},
            format='json'
        )

        assert response.data['message'] == 'There are no changes!'
        order.refresh_from_db()
        assert order.updated_at == updated_at

    def test_delete_order(self, auth_client, create_order):
        order = create_order()

        response = auth_client.delete(f'/api/v1/orders/{order.id}/')

        assert response.data['message'] == 'Order deleted success!'
        assert not Order.objects.exists()
