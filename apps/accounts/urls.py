"""
Account URLs.
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import ClientViewSet, LoginView, LogoutView

router = DefaultRouter()
router.register(r'clients', ClientViewSet, basename='client')

urlpatterns = [
    # Token auth
    path('login/', LoginView.as_view(), name='login'),
    path('logout/', LogoutView.as_view(), name='logout'),

    # ViewSets
    path('', include(router.urls)),
]
