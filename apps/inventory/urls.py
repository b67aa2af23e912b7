"""
Inventory URLs.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import ProductWarehouseViewSet

router = DefaultRouter()
router.register(r'product-warehouses', ProductWarehouseViewSet, basename='product-warehouse')

urlpatterns = [
    path('', include(router.urls)),
]
