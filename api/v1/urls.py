"""
API v1 URL Configuration.
"""
from django.urls import path, include

urlpatterns = [
    # Auth & Clients
    path('', include('apps.accounts.urls')),

    # Products
    path('', include('apps.products.urls')),

    # Warehouses
    path('', include('apps.warehouses.urls')),

    # Product stock per warehouse
    path('', include('apps.inventory.urls')),

    # Orders
    path('', include('apps.sales.urls')),

    # Currency proxy
    path('', include('apps.currency.urls')),
]
