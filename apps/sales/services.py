"""
Sales services.
"""
from decimal import Decimal

from apps.products.models import Product
from .models import Order


class OrderService:
    """Order business logic service."""

    @staticmethod
    def calculate_full_amount(quantity, amount):
        """full_amount = quantity * unit price."""
        return Decimal(quantity) * Decimal(str(amount))

    @staticmethod
    def create_order(client, product, warehouse, quantity):
        """
        Create an order for ``client`` priced at the product's current amount.
        """
        return Order.objects.create(
            client=client,
            product=product,
            warehouse=warehouse,
            quantity=quantity,
            full_amount=OrderService.calculate_full_amount(quantity, product.amount)
        )

    @staticmethod
    def change_quantity(order, quantity):
        """
        Set a new quantity and reprice the order from the product's
        amount as stored right now.
        """
        amount = Product.objects.values_list('amount', flat=True).get(pk=order.product_id)
        order.quantity = quantity
        order.full_amount = OrderService.calculate_full_amount(quantity, amount)
        order.save(update_fields=['quantity', 'full_amount', 'updated_at'])
        return order
